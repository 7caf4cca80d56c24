"""
Unit test for the helpers that strip or count derivative information.
"""

import pytest
import numpy as np
from autograd import grad

from gcpcsaft.equations_of_state.numeric import re, derivative_order


def test_plain_values():

    assert re(2.5) == 2.5
    assert derivative_order(2.5, np.ones(3)) == 0


def test_derivative_order():

    orders = []

    def func(x):
        orders.append(derivative_order(x, 3.0))
        assert re(x) == pytest.approx(1.5)
        return x ** 3

    assert grad(func)(1.5) == pytest.approx(3 * 1.5 ** 2)
    assert orders[-1] == 1

    assert grad(grad(func))(1.5) == pytest.approx(6 * 1.5)
    assert orders[-1] == 2


def test_branch_on_value():

    def func(x):
        if re(x) > 1.0:
            return x ** 2
        else:
            return -x

    assert grad(func)(2.0) == pytest.approx(4.0)
    assert grad(func)(0.5) == pytest.approx(-1.0)
