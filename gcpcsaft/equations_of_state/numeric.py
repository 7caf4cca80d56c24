"""
Helpers that let each Helmholtz energy routine be written once for plain floats and for automatic differentiation.

Functions of ``autograd.numpy`` accept plain numbers and arrays, in which case only the value is computed, and ``autograd`` boxes, which carry first derivatives inside ``autograd.grad`` and higher derivatives when differentiation is nested. Control flow such as a change of branch or a convergence test must be decided on the underlying value, which is obtained with :func:`re`.
"""

from autograd.tracer import Box, getval


def re(value):
    """
    Return the value of a number with all derivative information removed.

    Parameters
    ----------
    value : float, numpy.ndarray, autograd.tracer.Box
        Plain or derivative carrying number

    Returns
    -------
    value : float, numpy.ndarray
        Underlying value
    """
    return getval(value)


def derivative_order(*values):
    """
    Count the number of nested derivative layers carried by the given values.

    A plain number has order zero, a number traced once by ``autograd`` has order one, a number traced by nested differentiation has order two, and so on.

    Parameters
    ----------
    values : float, numpy.ndarray, autograd.tracer.Box
        Plain or derivative carrying numbers

    Returns
    -------
    order : int
        Largest number of nested derivative layers found among the given values
    """

    order = 0
    for value in values:
        tmp = 0
        while isinstance(value, Box):
            value = value._value
            tmp += 1
        order = max(order, tmp)

    return order
