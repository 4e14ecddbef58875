"""
A stream is a lazily evaluated, singly linked sequence.

A stream is either Empty, or a Cons of two thunks: one produces the first
element, the other produces the rest of the stream, which is again a stream.
Nothing is evaluated before a thunk is forced, and no thunk is evaluated
twice, so a stream may be infinite as long as its consumers only ask for a
finite part of it.

Materializing an infinite stream (to_list, len, iterating to the end) or
searching it for an element that never comes (filter, find, exists, for_all,
has_subsequence) does not return.
"""

from functional_data_structures import Singleton, Some, Nothing
from logger import logger
from thunk import Thunk

REPR_LIMIT = 10


class Stream:
    """Operations shared by Empty and Cons.

    Subclasses provide head, tail, is_empty, fold_right and __bool__.
    """

    def exists(self, pred):
        for item in self:
            if pred(item):
                return True
        return False

    def for_all(self, pred):
        for item in self:
            if not pred(item):
                return False
        return True

    def head_option(self):
        return self.fold_right(Nothing, lambda head, _: Some(head))

    def find(self, pred):
        return self.filter(pred).head_option()

    def map(self, func):
        return self.fold_right(empty, lambda head, rest: cons(lambda: func(head), rest))

    def filter(self, pred):
        """Stream of the elements that satisfy pred.

        Skips ahead to the first match right away. If there is none, and the
        stream is infinite, this does not return.
        """
        s = self
        while s and not pred(s.head):
            s = s.tail
        if not s:
            return empty()
        rest = s._tail
        return Cons(s._head, Thunk(lambda: rest.force().filter(pred)))

    def append(self, other):
        """Stream of the elements of self followed by those of other.

        other is a stream or a function that returns one. The function is not
        called before self is exhausted.
        """
        if isinstance(other, Stream):
            return self.fold_right(lambda: other, lambda head, rest: cons(lambda: head, rest))
        return self.fold_right(other, lambda head, rest: cons(lambda: head, rest))

    def flat_map(self, func):
        """Stream of the elements of func(item) for each item, in order.

        Items for which func returns an empty stream are skipped right away,
        like non-matching items in filter.
        """
        s = self
        while s:
            inner = func(s.head)
            if inner:
                rest = s._tail
                return inner.append(lambda: rest.force().flat_map(func))
            s = s.tail
        return empty()

    def take(self, n):
        if self and n > 1:
            tail = self._tail
            return Cons(self._head, Thunk(lambda: tail.force().take(n - 1)))
        if self and n == 1:
            return Cons(self._head, Thunk(empty))
        return empty()

    def take_while(self, pred):
        if self and pred(self.head):
            tail = self._tail
            return Cons(self._head, Thunk(lambda: tail.force().take_while(pred)))
        return empty()

    def drop(self, n):
        s = self
        while s and n > 0:
            s = s.tail
            n -= 1
        return s

    def zip_with(self, other, func):
        """Stream of func applied to pairs of elements, as long as the shorter input."""

        def step(pair):
            left, right = pair[0](), pair[1]()
            if left and right:
                return Some((func(left.head, right.head), (left._tail, right._tail)))
            return Nothing()

        return unfold((lambda: self, lambda: other), step)

    def zip(self, other):
        return self.zip_with(other, lambda a, b: (a, b))

    def zip_with_all(self, other, func):
        """Stream of func applied to pairs of optional elements, as long as the longer input.

        The side that ran out is passed as Nothing().
        """

        def step(pair):
            left, right = pair[0](), pair[1]()
            if not left and not right:
                return Nothing()
            return Some((func(left.head_option(), right.head_option()),
                         (_rest(left), _rest(right))))

        return unfold((lambda: self, lambda: other), step)

    def zip_all(self, other):
        return self.zip_with_all(other, lambda a, b: (a, b))

    def tails(self):
        """Stream of all suffixes, starting with self and ending with the empty stream."""
        suffixes = unfold(self, lambda s: Some((s, s.drop(1))) if s else Nothing())
        return suffixes.append(lambda: stream(empty()))

    def starts_with(self, prefix):
        return (self.zip_all(prefix)
                .take_while(lambda pair: not pair[1].is_empty())
                .for_all(lambda pair: pair[0] == pair[1]))

    def has_subsequence(self, sub):
        return self.tails().exists(lambda suffix: suffix.starts_with(sub))

    def scan_right(self, z, func):
        """Stream of the intermediate results of a right fold, the full fold first and z last.

        One pass from the last element to the first carries both the current
        accumulator and the stream of accumulators built so far.
        """

        def push(result, rest):
            return cons(lambda: result, lambda: rest)

        acc, scanned = z, stream(z)
        for item in reversed(self.to_list()):
            acc = func(item, acc)
            scanned = push(acc, scanned)
        return scanned

    def to_list(self):
        buf = []
        s = self
        while s:
            buf.append(s.head)
            s = s.tail
        logger.debug('materialized stream of %d elements', len(buf))
        return buf

    def __iter__(self):
        s = self
        while s:
            yield s.head
            s = s.tail

    def __contains__(self, item):
        return self.exists(lambda x: x == item)

    def __len__(self):
        raise TypeError("object of type '{}' has no len(), use to_list()".format(type(self).__name__))

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __repr__(self):
        items = []
        s = self
        while s and len(items) < REPR_LIMIT:
            items.append(repr(s._head.force()) if s._head.is_forced else '?')
            if not s._tail.is_forced:
                items.append('...')
                break
            s = s._tail.force()
        else:
            if s:
                items.append('...')
        return 'Stream({})'.format(', '.join(items))


class Empty(Singleton, Stream):
    """The empty stream"""

    @staticmethod
    def is_empty():
        return True

    @property
    def head(self):
        raise IndexError('head of empty stream')

    @property
    def tail(self):
        raise IndexError('tail of empty stream')

    @staticmethod
    def fold_right(z, _func):
        return z()

    @staticmethod
    def __bool__():
        return False


class Cons(Stream, tuple):
    """A stream with at least one element.

    Holds a thunk for the first element and a thunk for the rest of the stream.
    """

    def __new__(cls, head, tail):
        return super().__new__(cls, (head, tail))

    @staticmethod
    def is_empty():
        return False

    @property
    def head(self):
        return self._head.force()

    @property
    def tail(self):
        return self._tail.force()

    def fold_right(self, z, func):
        """Fold from the right without forcing more than func asks for.

        func receives an element and a function that folds the rest of the
        stream. If func never calls it, the fold stops there.
        """
        return func(self.head, lambda: self.tail.fold_right(z, func))

    @property
    def _head(self):
        return self[0]

    @property
    def _tail(self):
        return self[1]

    @staticmethod
    def __bool__():
        return True


def _rest(s):
    if s:
        return s._tail
    return empty


def cons(head, tail):
    return Cons(Thunk(head), Thunk(tail))


def empty():
    return Empty()


def stream(*items):
    def build(i):
        if i == len(items):
            return empty()
        return cons(lambda: items[i], lambda: build(i + 1))

    return build(0)


def unfold(seed, step):
    """Build a stream from a seed.

    step takes a seed and returns Nothing() to end the stream, or
    Some((item, next_seed)) to produce item and continue from next_seed.
    step is only called again when the tail is forced.
    """
    option = step(seed)
    if option.is_empty():
        return empty()
    item, next_seed = option.get()
    return cons(lambda: item, lambda: unfold(next_seed, step))


def constant(item):
    """Infinite stream of item, a single node whose tail is itself."""
    node = cons(lambda: item, lambda: node)
    return node


def ones():
    return constant(1)


def integers_from(n):
    return cons(lambda: n, lambda: integers_from(n + 1))


def fibs():
    return unfold((0, 1), lambda s: Some((s[0], (s[1], s[0] + s[1]))))
