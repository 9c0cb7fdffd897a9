import unittest

from cooldown_engine.properties import (
    cp_n2,
    cp_steel,
    density_n2,
    friction_factor,
    n2_mass_flow,
    viscosity_n2,
    ATMOSPHERIC_PRESSURE_BAR,
    RHO_N2_NORMAL,
)


class TestPropertyFunctions(unittest.TestCase):
    def test_cp_steel_branches(self):
        self.assertAlmostEqual(cp_steel(0.0), 440.0 + 0.15 * 0.15, places=9)
        # below 100 K the cryogenic fit applies
        self.assertAlmostEqual(cp_steel(-200.0), 150.0 + 2.5 * 73.15, places=9)
        self.assertLess(cp_steel(-200.0), cp_steel(20.0))

    def test_cp_n2_constant(self):
        self.assertEqual(cp_n2(-150.0), cp_n2(40.0))

    def test_viscosity_reference_point(self):
        self.assertAlmostEqual(viscosity_n2(20.0), 1.76e-5, places=12)
        self.assertLess(viscosity_n2(-150.0), viscosity_n2(20.0))

    def test_density_at_normal_conditions(self):
        rho = density_n2(0.0, ATMOSPHERIC_PRESSURE_BAR)
        self.assertAlmostEqual(rho, RHO_N2_NORMAL, places=2)
        self.assertGreater(density_n2(-100.0, 1.0), density_n2(20.0, 1.0))
        self.assertAlmostEqual(density_n2(20.0, 2.0), 2.0 * density_n2(20.0, 1.0), places=12)

    def test_friction_factor_laminar(self):
        self.assertAlmostEqual(friction_factor(1000.0, 1e-4), 0.064, places=12)

    def test_friction_factor_turbulent_range(self):
        f = friction_factor(1e5, 1e-4)
        self.assertGreater(f, 0.015)
        self.assertLess(f, 0.025)
        self.assertGreater(friction_factor(1e5, 1e-2), f, "Rougher pipe should have more friction.")

    def test_friction_factor_transition_is_not_smoothed(self):
        self.assertNotAlmostEqual(friction_factor(2299.9, 1e-4), friction_factor(2300.0, 1e-4), places=3)

    def test_mass_flow_conversion(self):
        self.assertAlmostEqual(n2_mass_flow(3600.0), RHO_N2_NORMAL, places=12)
        self.assertEqual(n2_mass_flow(0.0), 0.0)


if __name__ == "__main__":
    unittest.main()
