"""Tests for operation tables and field extraction."""

import logging

from sortedcontainers import SortedSet

from multiextend import compose
from multiextend.plumbing import (
    construct,
    fit_arguments,
    member_names,
    merge_tables,
    operation_tables,
    own_fields,
)
from multiextend.utils import describe_member, dict_update


class Shape:
    sides = 0

    def __init__(self, name='shape'):
        self.name = name

    def area(self):
        return 0

    @property
    def label(self):
        return self.name.upper()

    @staticmethod
    def unit():
        return 'cm'

    @classmethod
    def make(cls):
        return cls()


class Square(Shape):
    sides = 4

    def perimeter(self):
        return 4


class Lazy:
    __slots__ = ('value', 'other')


class TestOperationTables:
    def test_split(self):
        (inst, stat) = operation_tables(Shape)
        assert list(inst) == ['area', 'label']
        assert list(stat) == ['sides', 'unit', 'make']

    def test_reserved_names_are_skipped(self):
        (inst, stat) = operation_tables(Shape)
        for name in ('__init__', '__module__', '__doc__', '__dict__', '__weakref__'):
            assert name not in inst
            assert name not in stat

    def test_only_own_members(self):
        (inst, stat) = operation_tables(Square)
        assert list(inst) == ['perimeter']
        assert list(stat) == ['sides']

    def test_slot_descriptors_are_skipped(self):
        assert operation_tables(Lazy) == ({}, {})


class TestMergeTables:
    def test_last_wins(self):
        class Other:
            sides = 3

            def area(self):
                return 1

        (namespace, inst, stat) = merge_tables((Shape, Other))
        assert inst['area'] is vars(Other)['area']
        assert stat['sides'] == 3
        assert list(namespace) == ['area', 'label', 'sides', 'unit', 'make']

    def test_names_move_between_tables(self):
        class Other:
            area = 12

        (namespace, inst, stat) = merge_tables((Shape, Other))
        assert 'area' not in inst
        assert stat['area'] == 12
        assert namespace['area'] == 12

    def test_empty_classes(self):
        class Empty:
            pass

        assert merge_tables((Empty, Empty)) == ({}, {}, {})


class TestFields:
    def test_dict_fields(self):
        assert own_fields(Shape('sq')) == {'name': 'sq'}

    def test_unset_slots(self):
        lazy = Lazy()
        assert own_fields(lazy) == {}
        lazy.value = 1
        assert own_fields(lazy) == {'value': 1}

    def test_construct_ignores_arguments_without_init(self):
        class Bare:
            pass

        assert isinstance(construct(Bare, ('x',), {'y': 1}), Bare)

    def test_fit_arguments(self):
        class Narrow:
            def __init__(self, a, b=0):
                pass

        class Wide:
            def __init__(self, *args, **kwargs):
                pass

        assert fit_arguments(Narrow, (1, 2, 3), {'c': 3}) == ((1, 2), {})
        assert fit_arguments(Narrow, (1,), {'b': 2, 'c': 3}) == ((1,), {'b': 2})
        assert fit_arguments(Wide, (1, 2, 3), {'c': 3}) == ((1, 2, 3), {'c': 3})

    def test_construct_replays_arguments(self):
        assert construct(Shape, ('tri',), {}).name == 'tri'
        assert construct(Shape, (), {'name': 'kw'}).name == 'kw'


class TestMemberNames:
    def test_plain_class(self):
        assert member_names(Shape) == SortedSet(['area', 'label', 'make', 'sides', 'unit'])

    def test_composed_class(self):
        names = member_names(compose(Shape, Square))
        assert isinstance(names, SortedSet)
        assert list(names) == ['area', 'label', 'make', 'perimeter', 'sides', 'unit']


class TestUtils:
    def test_dict_update_logs_overrides(self, caplog):
        caplog.set_level(logging.DEBUG, logger='multiextend')
        d = {'a': 1, 'b': 2}
        assert dict_update(d, {'b': 3}, {'c': 4}, label='test') == {'a': 1, 'b': 3, 'c': 4}
        assert 'test: b' in caplog.text

    def test_describe_member(self):
        assert describe_member(vars(Shape)['unit']) == 'staticmethod(Shape.unit)'
        assert describe_member(3) == 'int(3)'
