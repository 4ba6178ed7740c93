"""Error kinds, exceptions and result types shared by the kernels."""

import enum


class ErrorKind(enum.Enum):
    """Reason a conditioning operation was rejected."""
    INSUFFICIENT_SAMPLES = 'insufficient samples'
    NYQUIST = 'cutoff exceeds Nyquist'
    SAMPLE_RATE = 'invalid sample rate'
    RESONANCE = 'invalid resonance'
    ALLOCATION = 'allocation failure'
    BIN_WIDTH = 'invalid bin width'
    ZERO_INDEX = 'zero index out of range'
    INVALID_ARRAY = 'invalid sample array'
    NO_VALID_DATA = 'no valid data'
    MULTIPLIER = 'invalid multiplier'


class ConditioningError(Exception):
    def __init__(self, kind, message, function=None):
        """Raise when parameters or data for a conditioning step are invalid.

        Parameters
        ----------
        kind : ErrorKind
            Category of the violated constraint.
        message : str
            Human-readable description, including the offending value.
        function : str; optional.
            Name of the operation that rejected its input.
        
        """
        self.kind = kind
        self.message = message
        self.function = function
        super().__init__(message)

    def __str__(self):
        if self.function is None:
            return self.message
        return f'{self.function} [ERROR]: {self.message}'


class Outcome:
    """Success or failure of a kernel call, with a diagnostic message.

    Kernels return an `Outcome` instead of raising, so that callers can decide
    whether to halt a pipeline, skip a channel or warn. `bool(outcome)` is
    True for success.

    Attributes
    ----------
    ok : bool
    kind : ErrorKind or None
        None on success.
    message : str
    function : str or None
        Name of the kernel that produced this outcome.

    """

    def __init__(self, ok, message, kind=None, function=None):
        self.ok = ok
        self.kind = kind
        self.message = message
        self.function = function

    @classmethod
    def success(cls, message, function=None, **kwargs):
        return cls(True, message, function=function, **kwargs)

    @classmethod
    def failure(cls, error, **kwargs):
        """Build a failed outcome from a `ConditioningError`."""
        return cls(False, error.message, kind=error.kind,
                   function=error.function, **kwargs)

    def raise_for_error(self):
        """Raise `ConditioningError` if this outcome is a failure.

        Returns
        -------
        self
        
        """
        if not self.ok:
            raise ConditioningError(self.kind, self.message, self.function)
        return self

    def __bool__(self):
        return self.ok

    def __str__(self):
        if self.function is None:
            return self.message
        return f'{self.function} ({self.message})'

    def __repr__(self):
        return (f'{type(self).__name__}(ok={self.ok}, kind={self.kind}, '
                f'message={self.message!r})')


class BinOutcome(Outcome):
    """`Outcome` of `bin_average`, carrying the compacted frame.

    Attributes
    ----------
    n : int
        Number of leading positions of the data array that hold bin values.
        Equal to the input length on failure.
    zero : int
        Index of the zero bin in the compacted array. Equal to the input
        zero index on failure.
    flags : np.ndarray of bool
        Flag array marking positions that hold bin values.

    """

    def __init__(self, ok, message, kind=None, function=None, n=0, zero=0,
                 flags=None):
        super().__init__(ok, message, kind=kind, function=function)
        self.n = n
        self.zero = zero
        self.flags = flags

    def __repr__(self):
        return (f'{type(self).__name__}(ok={self.ok}, kind={self.kind}, '
                f'n={self.n}, zero={self.zero}, message={self.message!r})')
