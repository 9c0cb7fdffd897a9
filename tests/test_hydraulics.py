import unittest

from cooldown_engine.geometry import prep_geometry
from cooldown_engine.hydraulics import friction_loss_pa, gas_column_pressure_bar, inlet_pressure_bar
from cooldown_engine.properties import ATMOSPHERIC_PRESSURE_BAR
from cooldown_engine.types import CooldownInputs


class TestPressureDrop(unittest.TestCase):
    def setUp(self):
        self.geo = prep_geometry(CooldownInputs())
        self.temps = [40.0] * self.geo.n_segments

    def test_friction_loss_positive(self):
        loss = friction_loss_pa(1.0, 100.0, 20.0, 1.0, self.geo.inner_diameter, self.geo.flow_area,
                                self.geo.relative_roughness)
        self.assertGreater(loss, 0, "Friction loss should be positive.")

    def test_zero_flow_gives_back_pressure(self):
        self.assertEqual(inlet_pressure_bar(self.temps, 0.0, self.geo, ATMOSPHERIC_PRESSURE_BAR),
                         ATMOSPHERIC_PRESSURE_BAR)

    def test_inlet_pressure_not_below_back_pressure(self):
        for flow in (1.0, 100.0, 1000.0, 5000.0):
            p = inlet_pressure_bar(self.temps, flow, self.geo, ATMOSPHERIC_PRESSURE_BAR)
            self.assertGreaterEqual(p, ATMOSPHERIC_PRESSURE_BAR)

    def test_inlet_pressure_rises_with_flow(self):
        p1 = inlet_pressure_bar(self.temps, 1000.0, self.geo, ATMOSPHERIC_PRESSURE_BAR)
        p5 = inlet_pressure_bar(self.temps, 5000.0, self.geo, ATMOSPHERIC_PRESSURE_BAR)
        self.assertGreater(p5, p1)

    def test_cold_gas_drops_less_pressure(self):
        # denser gas moves slower for the same mass flow
        warm = inlet_pressure_bar(self.temps, 5000.0, self.geo, ATMOSPHERIC_PRESSURE_BAR)
        cold = inlet_pressure_bar([-110.0] * self.geo.n_segments, 5000.0, self.geo, ATMOSPHERIC_PRESSURE_BAR)
        self.assertLess(cold, warm)

    def test_gas_column(self):
        self.assertEqual(gas_column_pressure_bar(0.1, 0.0, -110.0, self.geo, 1.1), 1.1)
        self.assertEqual(gas_column_pressure_bar(0.0, 500.0, -110.0, self.geo, 1.1), 1.1)
        short = gas_column_pressure_bar(0.1, 100.0, -110.0, self.geo, 1.1)
        long = gas_column_pressure_bar(0.1, 500.0, -110.0, self.geo, 1.1)
        self.assertGreater(short, 1.1)
        self.assertGreater(long, short)


if __name__ == "__main__":
    unittest.main()
