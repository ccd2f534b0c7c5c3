"""
Unit tests for group parameter validation.
"""

import dataclasses
import logging

import pytest

from schnorr_pok.exceptions import ParameterError
from schnorr_pok.group import NAMED_GROUPS, RFC3526_2048_P, GroupParameters, get_group


class TestValidParameters:
    """Well-formed parameters are accepted."""

    def test_toy_group(self):
        params = GroupParameters(p=23, q=11, g=4)
        assert (params.p, params.q, params.g) == (23, 11, 4)
        assert params.element_size == 1

    def test_rfc3526_group(self, rfc_params):
        assert rfc_params.p == RFC3526_2048_P
        assert rfc_params.p.bit_length() == 2048
        assert rfc_params.q == (rfc_params.p - 1) // 2
        assert rfc_params.g == 2
        assert rfc_params.element_size == 256
        assert pow(rfc_params.g, rfc_params.q, rfc_params.p) == 1

    def test_parameters_are_immutable(self, toy_params):
        with pytest.raises(dataclasses.FrozenInstanceError):
            toy_params.g = 2

    def test_small_group_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="schnorr_pok.group"):
            GroupParameters(p=23, q=11, g=4)
        assert "insecure" in caplog.text

    def test_large_group_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="schnorr_pok.group"):
            get_group("rfc3526-2048")
        assert caplog.text == ""


class TestInvalidParameters:
    """Every structural invariant is enforced."""

    def test_generator_not_of_order_q(self):
        # 5 is a quadratic non-residue mod 23, so 5^11 = -1 mod 23
        with pytest.raises(ParameterError, match="g\\^q mod p != 1"):
            GroupParameters(p=23, q=11, g=5)

    def test_q_does_not_divide_p_minus_one(self):
        with pytest.raises(ParameterError, match="divide"):
            GroupParameters(p=23, q=7, g=4)

    def test_q_not_less_than_p(self):
        with pytest.raises(ParameterError, match="1 < q < p"):
            GroupParameters(p=23, q=23, g=4)

    def test_q_too_small(self):
        with pytest.raises(ParameterError, match="1 < q < p"):
            GroupParameters(p=23, q=1, g=4)

    @pytest.mark.parametrize("g", [0, 1, 23, 24])
    def test_generator_out_of_range(self, g):
        with pytest.raises(ParameterError, match="1 < g < p"):
            GroupParameters(p=23, q=11, g=g)

    def test_p_too_small(self):
        with pytest.raises(ParameterError, match="p must be > 2"):
            GroupParameters(p=2, q=1, g=1)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"p": "23", "q": 11, "g": 4},
            {"p": 23, "q": 11.0, "g": 4},
            {"p": 23, "q": 11, "g": True},
        ],
    )
    def test_non_int_values(self, kwargs):
        with pytest.raises(ParameterError, match="must be int"):
            GroupParameters(**kwargs)

    def test_error_reports_stage(self):
        with pytest.raises(ParameterError) as exc_info:
            GroupParameters(p=23, q=11, g=5)
        assert exc_info.value.stage == "parameters"
        assert str(exc_info.value).startswith("[parameters]")


class TestMembership:
    """Subgroup membership check."""

    @pytest.mark.parametrize("element", [1, 2, 3, 4, 6, 8, 9, 12, 13, 16, 18])
    def test_quadratic_residues_are_members(self, toy_params, element):
        assert toy_params.contains(element)

    @pytest.mark.parametrize("element", [0, 5, 22, 23, -4, True, "4"])
    def test_non_members(self, toy_params, element):
        assert not toy_params.contains(element)


class TestNamedGroups:
    def test_registry(self):
        assert set(NAMED_GROUPS) == {"toy", "rfc3526-2048"}

    def test_get_group_returns_parameters(self):
        assert get_group("toy") == GroupParameters(p=23, q=11, g=4)

    def test_unknown_group(self):
        with pytest.raises(ParameterError, match="Unknown group"):
            get_group("modp-1024")
