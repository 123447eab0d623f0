from zonestash.errors import StashException


class Result:
    """
    The outcome of a stash operation. A result is truthy when the operation
    succeeded. Failed results carry the exception that describes the problem
    in `error`, but it is only raised if you ask for it with `unwrap()`:

    .. code-block:: python

        stash.add('head', '<title>foo</title>', 'html:title').unwrap()
    """

    __slots__ = ('ok', 'value', 'error')

    def __init__(self, ok, value=None, error=None):
        assert ok == (error is None), 'A failed result needs an error, a successful one must not have one'
        self.ok = ok
        self.value = value
        self.error = error

    @classmethod
    def success(cls, value=None):
        return cls(True, value)

    @classmethod
    def failure(cls, error: StashException, value=None):
        return cls(False, value, error)

    @property
    def kind(self):
        return None if self.error is None else self.error.kind

    @property
    def message(self):
        return None if self.error is None else str(self.error)

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self):
        return self.ok

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return (self.ok, self.value, self.kind) == (other.ok, other.value, other.kind)

    def __hash__(self):
        return hash((self.ok, self.kind))

    def __repr__(self):
        if self.ok:
            return f'<Result ok value={self.value!r}>'
        return f'<Result {self.kind.name} {self.message!r}>'
