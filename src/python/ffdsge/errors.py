class ModelError(Exception):
    """Base class for errors raised by ffdsge."""


class ParameterError(ModelError, ValueError):
    pass


class InvalidTransformError(ParameterError):
    pass


class FixedParameterMutationError(ParameterError):
    def __init__(self, name):
        super().__init__(f"Parameter '{name}' is fixed and cannot be changed")
        self.name = name


class UnknownNameError(ModelError, KeyError):
    def __init__(self, name, where="model"):
        super().__init__(f"'{name}' is not a parameter or steady-state value of the {where}")
        self.name = name

    def __str__(self):
        return self.args[0]


class DuplicateNameError(ModelError, ValueError):
    pass


class SteadyStateDomainError(ModelError, ArithmeticError):
    pass


class RootFindNonConvergence(ModelError, RuntimeError):
    pass
