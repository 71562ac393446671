"""Unit tests for method resolution and per-method parameter defaults."""
import unittest

from csample.sampling.base import SamplingConfigError, SamplingMethod
from csample.sampling.parameters import resolve_method, resolve_parameters


class TestResolveMethod(unittest.TestCase):
    def test_short_names(self):
        self.assertIs(resolve_method("sp"), SamplingMethod.SYSTEMATIC_PROPORTIONAL)
        self.assertIs(resolve_method("sf"), SamplingMethod.SYSTEMATIC_FIXED)
        self.assertIs(resolve_method("rp"), SamplingMethod.RANDOM_PROPORTIONAL)
        self.assertIs(resolve_method("rf"), SamplingMethod.RANDOM_FIXED)

    def test_long_names_and_spellings(self):
        self.assertIs(resolve_method("systematicproportion"), SamplingMethod.SYSTEMATIC_PROPORTIONAL)
        self.assertIs(resolve_method("Systematic-Fixed"), SamplingMethod.SYSTEMATIC_FIXED)
        self.assertIs(resolve_method("random_proportional"), SamplingMethod.RANDOM_PROPORTIONAL)
        self.assertIs(resolve_method("random fixed"), SamplingMethod.RANDOM_FIXED)

    def test_unknown(self):
        self.assertIsNone(resolve_method("stratified"))
        self.assertIsNone(resolve_method(""))
        self.assertIsNone(resolve_method(None))


class TestSystematicProportionalDefaults(unittest.TestCase):
    def test_zero_basis_uses_default(self):
        params, warnings = resolve_parameters("sp", 0, 0)
        self.assertEqual(params.basis, 2)
        self.assertEqual(params.offset, 2)
        self.assertEqual(warnings, [])

    def test_offset_defaults_to_stride(self):
        params, _ = resolve_parameters("sp", 5, 0)
        self.assertEqual((params.basis, params.offset), (5, 5))

    def test_explicit_offset_kept(self):
        params, _ = resolve_parameters("sp", 5, 3)
        self.assertEqual(params.offset, 3)

    def test_basis_below_one_reset_with_warning(self):
        params, warnings = resolve_parameters("sp", 0.5, 0)
        self.assertEqual(params.basis, 2)
        self.assertEqual(len(warnings), 1)
        self.assertIn("less than one", warnings[0])

    def test_stride_one_is_flagged_as_identical(self):
        params, warnings = resolve_parameters("sp", 1, 0)
        self.assertEqual(params.basis, 1)
        self.assertEqual(len(warnings), 1)
        self.assertIn("identical", warnings[0])

    def test_fractional_stride_truncated(self):
        params, warnings = resolve_parameters("sp", 3.7, 0)
        self.assertEqual(params.basis, 3)
        self.assertEqual(params.offset, 3)
        self.assertIn("truncated", warnings[0])


class TestOtherMethodDefaults(unittest.TestCase):
    def test_systematic_fixed_default(self):
        params, warnings = resolve_parameters("sf", 0)
        self.assertIs(params.method, SamplingMethod.SYSTEMATIC_FIXED)
        self.assertEqual(params.basis, 50)
        self.assertEqual(warnings, [])

    def test_systematic_fixed_keeps_basis(self):
        params, _ = resolve_parameters("sf", 25)
        self.assertEqual(params.basis, 25)

    def test_random_proportional_default(self):
        params, warnings = resolve_parameters("rp", 0)
        self.assertEqual(params.basis, 0.5)
        self.assertEqual(warnings, [])

    def test_random_proportional_percentage(self):
        params, warnings = resolve_parameters("rp", 25)
        self.assertAlmostEqual(params.basis, 0.25)
        self.assertEqual(len(warnings), 1)
        self.assertIn("p = 0.25", warnings[0])

    def test_random_proportional_one_is_one_percent(self):
        params, _ = resolve_parameters("rp", 1)
        self.assertAlmostEqual(params.basis, 0.01)

    def test_random_fixed_default(self):
        params, warnings = resolve_parameters("rf", 0)
        self.assertEqual(params.basis, 50)
        self.assertEqual(warnings, [])

    def test_random_fixed_below_one_reset(self):
        params, warnings = resolve_parameters("rf", 0.3)
        self.assertEqual(params.basis, 50)
        self.assertIn("less than one", warnings[0])


class TestUnknownMethodFallback(unittest.TestCase):
    """The fallback reinterprets bases below one as percentages.

    This mirrors a quirk of the original csample.pl rather than a deliberate
    design: 0.25 becomes a stride of 25, not a probability.
    """

    def test_fallback_to_systematic_proportional(self):
        params, warnings = resolve_parameters("bogus", 3)
        self.assertIs(params.method, SamplingMethod.SYSTEMATIC_PROPORTIONAL)
        self.assertEqual((params.basis, params.offset), (3, 3))
        self.assertIn("unknown sampling method", warnings[-1])
        self.assertIn("n=3", warnings[-1])

    def test_fallback_fraction_becomes_stride(self):
        params, warnings = resolve_parameters("bogus", 0.25)
        self.assertEqual(params.basis, 25)
        self.assertEqual(params.offset, 25)
        self.assertIn("n=25", warnings[-1])

    def test_fallback_zero_basis(self):
        params, warnings = resolve_parameters("bogus", 0, 4)
        self.assertEqual(params.basis, 2)
        self.assertEqual(params.offset, 4)
        self.assertEqual(len(warnings), 1)


class TestNonFiniteBasis(unittest.TestCase):
    def test_infinite_basis_rejected(self):
        for method in ("sp", "sf", "rp", "rf"):
            with self.assertRaises(SamplingConfigError):
                resolve_parameters(method, float("inf"))

    def test_negative_infinite_basis_rejected(self):
        with self.assertRaises(SamplingConfigError):
            resolve_parameters("sp", float("-inf"))

    def test_nan_basis_rejected(self):
        with self.assertRaises(SamplingConfigError):
            resolve_parameters("bogus", float("nan"))


if __name__ == "__main__":
    unittest.main()
