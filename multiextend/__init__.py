# -*- encoding: utf-8
"""multiextend - compose several classes into one

Usage:

.. code:: python

    from multiextend import compose

    class Logger:
        def log(self, message):
            print('[LOG]: {}'.format(message))

    class EventEmitter:
        def emit(self, event, data):
            print('[EVENT]: {}'.format(event), data)

    class MyService(compose(Logger, EventEmitter)):
        def do_something(self):
            self.log('Operation started')
            self.emit('operation', {'status': 'started'})
"""

from .classmagic import ComposableType
from .extender import Extender, compose
from .plumbing import member_names
from .validation import ConfigurationError, validate_bases

__all__ = ['compose', 'Extender', 'ComposableType', 'ConfigurationError',
           'member_names', 'validate_bases', ]
