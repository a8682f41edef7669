class SweepInputError(ValueError):
    """Raised before any simulation work when the validation inputs are unusable."""


class NotEnoughInputsError(SweepInputError):
    pass


class TooManyInputsError(SweepInputError):
    pass


class TooManyOutputsError(SweepInputError):
    pass


class InvalidInputPatternError(SweepInputError):
    pass


class IncompleteModelParametersError(InvalidInputPatternError):
    pass


class InvalidStepSizesError(SweepInputError):
    pass


class BadSweepLengthError(InvalidStepSizesError):
    pass


class InvalidEnsembleSizeError(SweepInputError):
    pass


class BadEnsembleSizeError(InvalidEnsembleSizeError):
    pass


class InvalidModelParameterError(SweepInputError):
    pass


class InvalidConfigurationError(SweepInputError):
    pass


class UnsupportedRandomSourceError(SweepInputError):
    pass


class UnsupportedAntitheticError(SweepInputError):
    pass
