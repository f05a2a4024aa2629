"""Exceptions raised by the finite element core."""


class FiniteElementError(Exception):
    """Base class for errors raised by fecore."""


class UnsupportedTopology(FiniteElementError, ValueError):
    """No quadrature rule exists for the requested (dimension, topology) pair."""


class UnsupportedConfiguration(FiniteElementError, ValueError):
    """No shape functions exist for the requested (order, topology) pair."""


class RequiresPhysicalElement(FiniteElementError, TypeError):
    """The basis needs the physical element to build its degrees of freedom."""


class ContractViolation(FiniteElementError, AssertionError):
    """An element reported geometry that is inconsistent with its own topology."""
