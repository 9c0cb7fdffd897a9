import math
import unittest

from cooldown_engine.geometry import prep_geometry
from cooldown_engine.heat_transfer import heat_ingress, heat_removal, n2_temperature_march
from cooldown_engine.properties import conductivity_n2
from cooldown_engine.types import CooldownInputs


class TestHeatIngress(unittest.TestCase):
    def setUp(self):
        self.inputs = CooldownInputs()
        self.geo = prep_geometry(self.inputs)

    def ingress(self, temp, ambient=40.0, emissivity=0.9, h_ext=10.0):
        return heat_ingress(
            temp, ambient, self.geo.segment_insulation_area, emissivity, h_ext, self.geo.r_conductive_segment
        )

    def test_no_ingress_when_segment_at_or_above_ambient(self):
        for temp in (40.0, 55.0):
            res = self.ingress(temp)
            self.assertEqual((res.q_convection, res.q_radiation, res.q_total), (0.0, 0.0, 0.0))
            self.assertEqual(res.surface_temp, temp)

    def test_split_adds_up(self):
        res = self.ingress(-110.0)
        self.assertGreater(res.q_total, 0.0)
        self.assertAlmostEqual(res.q_convection + res.q_radiation, res.q_total, places=9)
        self.assertGreater(res.q_radiation, 0.0)

    def test_surface_temperature_between_pipe_and_ambient(self):
        res = self.ingress(-110.0)
        self.assertGreater(res.surface_temp, -110.0)
        self.assertLess(res.surface_temp, 40.0)
        # good insulation keeps the outer surface close to ambient
        self.assertGreater(res.surface_temp, 35.0)

    def test_zero_emissivity_is_pure_convection(self):
        res = self.ingress(-110.0, emissivity=0.0)
        self.assertEqual(res.q_radiation, 0.0)
        self.assertAlmostEqual(res.q_convection, res.q_total, places=12)

    def test_no_external_film_means_no_ingress(self):
        res = self.ingress(-110.0, emissivity=0.0, h_ext=0.0)
        self.assertEqual((res.q_convection, res.q_radiation, res.q_total), (0.0, 0.0, 0.0))
        self.assertEqual(res.surface_temp, 40.0)

    def test_ingress_grows_with_temperature_difference(self):
        self.assertGreater(self.ingress(-110.0).q_total, self.ingress(0.0).q_total)

    def test_poor_insulation_lets_in_more_heat(self):
        good = self.ingress(-50.0)
        bad_geo = prep_geometry(CooldownInputs(insulation_k=1.0))
        bad = heat_ingress(-50.0, 40.0, bad_geo.segment_insulation_area, 0.9, 1000.0, bad_geo.r_conductive_segment)
        self.assertGreater(bad.q_total, 50 * good.q_total)


class TestHeatRemoval(unittest.TestCase):
    def setUp(self):
        self.geo = prep_geometry(CooldownInputs())
        self.d = self.geo.inner_diameter
        self.area = self.geo.segment_inner_area

    def test_zero_flow_removes_nothing(self):
        res = heat_removal(0.0, 40.0, -100.0, self.d, self.area)
        self.assertEqual(res.q_removed, 0.0)
        self.assertEqual(res.n2_outlet_temp, -100.0)

    def test_gas_warmer_than_segment_removes_nothing(self):
        for gas in (-50.0, -40.0):
            res = heat_removal(1000.0, -50.0, gas, self.d, self.area)
            self.assertEqual(res.q_removed, 0.0)
            self.assertEqual(res.n2_outlet_temp, gas)

    def test_turbulent_removal_warms_gas_without_overshoot(self):
        res = heat_removal(1000.0, 40.0, 15.0, self.d, self.area)
        self.assertGreater(res.q_removed, 0.0)
        self.assertGreater(res.n2_outlet_temp, 15.0)
        self.assertLess(res.n2_outlet_temp, 40.0)

    def test_more_flow_removes_more_heat(self):
        low = heat_removal(1000.0, 40.0, 15.0, self.d, self.area).q_removed
        high = heat_removal(5000.0, 40.0, 15.0, self.d, self.area).q_removed
        self.assertGreater(high, low)

    def test_laminar_uses_constant_nusselt(self):
        flow = 1.0  # Nm³/h, Re well below 2300 in a 280 mm bore
        seg, gas = 20.0, 0.0
        res = heat_removal(flow, seg, gas, self.d, self.area)
        expected = 3.66 * conductivity_n2((seg + gas) / 2.0) / self.d * self.area * (seg - gas)
        self.assertTrue(math.isclose(res.q_removed, expected, rel_tol=1e-12))

    def test_march_gas_warms_along_pipe(self):
        temps = [40.0] * self.geo.n_segments
        removed = n2_temperature_march(temps, 15.0, 1000.0, self.d, self.area)
        self.assertEqual(len(removed), self.geo.n_segments)
        self.assertTrue(all(a >= b for a, b in zip(removed, removed[1:])))
        self.assertGreater(removed[0], 0.0)

    def test_march_zero_flow(self):
        removed = n2_temperature_march([40.0] * 5, 15.0, 0.0, self.d, self.area)
        self.assertEqual(removed, [0.0] * 5)


if __name__ == "__main__":
    unittest.main()
