"""
A thunk is a computation that has been deferred until its value is needed.

Forcing a thunk runs the computation once and keeps the result; every later
force returns that same result. The computation is expected to be pure, so
whether, when and how often a thunk is forced never changes what a program
computes, only how much work it does.

There is no locking: a thunk shared between threads may run its computation
more than once.
"""


class Thunk:
    def __init__(self, func):
        self._func = func
        self._value = None
        self._forced = False

    def force(self):
        if not self._forced:
            self._value = self._func()
            self._forced = True
            self._func = None
        return self._value

    @property
    def is_forced(self):
        return self._forced

    def __call__(self):
        return self.force()

    def __repr__(self):
        if self._forced:
            return 'Thunk({!r})'.format(self._value)
        return 'Thunk(?)'
