class Singleton:
    """Class with a single instance"""

    def __new__(cls):
        obj = object.__new__(cls)
        cls.__new__ = lambda _: obj
        return obj


class Nothing(Singleton):
    """The absent value"""

    @staticmethod
    def is_empty():
        return True

    @staticmethod
    def get():
        raise LookupError('Nothing has no value')

    @staticmethod
    def get_or_else(default):
        return default()

    def map(self, _func):
        return self

    def flat_map(self, _func):
        return self

    def filter(self, _pred):
        return self

    @staticmethod
    def or_else(other):
        return other()

    @staticmethod
    def __bool__():
        return False

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object is immutable".format(type(self).__name__))

    def __repr__(self):
        return 'Nothing'


class Some(tuple):
    """A value that is present.

    Like Nothing this is immutable; two Somes are equal when their values are.
    """

    def __new__(cls, value):
        return super().__new__(cls, (value,))

    @staticmethod
    def is_empty():
        return False

    def get(self):
        return self[0]

    def get_or_else(self, _default):
        return self[0]

    def map(self, func):
        return Some(func(self[0]))

    def flat_map(self, func):
        return func(self[0])

    def filter(self, pred):
        if pred(self[0]):
            return self
        return Nothing()

    def or_else(self, _other):
        return self

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __repr__(self):
        return 'Some({!r})'.format(self[0])
