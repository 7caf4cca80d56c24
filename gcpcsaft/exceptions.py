""" Exceptions raised while assembling parameters or evaluating the equation of state.

Parameter problems derive from ``ValueError`` and evaluation failures from ``RuntimeError`` so that callers catching the builtin types keep working.
"""


class ParameterError(ValueError):
    """ Assembly of a parameter set failed. """


class UnknownSegmentError(ParameterError):
    """ A chemical record refers to a segment that is missing from the bead library. """

    def __init__(self, identifier, molecule=None):
        self.identifier = identifier
        self.molecule = molecule
        if molecule is None:
            msg = "The segment, '{}', was not found in the bead library".format(identifier)
        else:
            msg = "The segment, '{}', of molecule '{}' was not found in the bead library".format(
                identifier, molecule
            )
        super().__init__(msg)


class InsufficientInformationError(ParameterError):
    """ A record lacks the information needed to build the parameter set. """


class ComponentsNotFoundError(ParameterError):
    """ One or more requested substances are missing from a catalogue. """

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            "The following components were not found: {}".format(", ".join(self.missing))
        )


class EosError(RuntimeError):
    """ Evaluation of the equation of state failed. """


class NotConvergedError(EosError):
    """ An inner iteration did not reach its tolerance within the iteration cap. """

    def __init__(self, calculation, max_iter):
        self.calculation = calculation
        self.max_iter = max_iter
        super().__init__(
            "The {} calculation did not converge within {} iterations".format(calculation, max_iter)
        )
