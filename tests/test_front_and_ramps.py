import unittest

import numpy as np

from cooldown_engine.front import MIXING_ZONE_SEGMENTS, front_position, mixing_factors
from cooldown_engine.ramps import fill_rate_setpoint, n2_flow_setpoint, n2_inlet_temp_setpoint

N = 50


class TestThermalFront(unittest.TestCase):
    def test_no_throughput(self):
        front = front_position(0.0, 30.0, N)
        self.assertEqual((front.leader, front.trailer), (0, 0))
        np.testing.assert_array_equal(mixing_factors(front, N), np.zeros(N))

    def test_half_swept_pipe(self):
        front = front_position(15.0, 30.0, N)
        self.assertEqual(front.leader, 25)
        self.assertEqual(front.trailer, 25 - MIXING_ZONE_SEGMENTS)
        f = mixing_factors(front, N)
        self.assertEqual(f[19], 1.0)
        self.assertEqual(f[20], 1.0)
        self.assertAlmostEqual(f[22], 0.6)
        self.assertEqual(f[25], 0.0)
        self.assertEqual(f[26], 0.0)

    def test_indices_clamped(self):
        front = front_position(1000.0, 30.0, N)
        self.assertEqual(front.leader, N)
        self.assertEqual(front.trailer, N)
        np.testing.assert_array_equal(mixing_factors(front, N), np.ones(N))

    def test_band_leaves_the_outlet(self):
        # just past one inventory the outlet is still blended
        front = front_position(30.9, 30.0, N)
        self.assertEqual(front.leader, N)
        f = mixing_factors(front, N)
        self.assertAlmostEqual(f[-1], 2 / MIXING_ZONE_SEGMENTS)

    def test_leader_monotonic_and_trailer_behind(self):
        prev = -1
        for throughput in np.linspace(0.0, 60.0, 241):
            front = front_position(float(throughput), 30.0, N)
            self.assertGreaterEqual(front.leader, prev)
            self.assertLessEqual(front.trailer, front.leader)
            self.assertTrue(0 <= front.trailer <= N and 0 <= front.leader <= N)
            f = mixing_factors(front, N)
            self.assertTrue(np.all((f >= 0.0) & (f <= 1.0)))
            prev = front.leader


class TestInletTemperatureController(unittest.TestCase):
    def setpoint(self, hours, step=30.0, hold=1.0):
        return n2_inlet_temp_setpoint(hours, 15.0, -150.0, step, hold)

    def test_step_and_hold(self):
        self.assertEqual(self.setpoint(0.0), 15.0)
        self.assertEqual(self.setpoint(0.99), 15.0)
        self.assertEqual(self.setpoint(1.0), -15.0)
        self.assertEqual(self.setpoint(2.5), -45.0)

    def test_clamped_at_final(self):
        self.assertEqual(self.setpoint(10.0), -150.0)

    def test_invalid_schedule_jumps_to_final(self):
        self.assertEqual(self.setpoint(0.0, step=0.0), -150.0)
        self.assertEqual(self.setpoint(0.0, hold=-1.0), -150.0)

    def test_output_range(self):
        for hours in np.linspace(0.0, 12.0, 97):
            t = self.setpoint(float(hours))
            self.assertTrue(-150.0 <= t <= 15.0)


class TestFlowController(unittest.TestCase):
    def setpoint(self, hours, intermediate_hours=4.0, total_hours=8.0):
        return n2_flow_setpoint(hours, 1000.0, 3000.0, 5000.0, intermediate_hours, total_hours)

    def test_two_stage_ramp(self):
        self.assertEqual(self.setpoint(0.0), 1000.0)
        self.assertEqual(self.setpoint(2.0), 2000.0)
        self.assertEqual(self.setpoint(4.0), 3000.0)
        self.assertEqual(self.setpoint(6.0), 4000.0)
        self.assertEqual(self.setpoint(8.0), 5000.0)
        self.assertEqual(self.setpoint(20.0), 5000.0)

    def test_zero_ramp_holds_max(self):
        self.assertEqual(self.setpoint(0.0, total_hours=0.0), 5000.0)

    def test_zero_intermediate_time(self):
        self.assertEqual(self.setpoint(0.0, intermediate_hours=0.0), 3000.0)
        self.assertEqual(self.setpoint(4.0, intermediate_hours=0.0), 4000.0)

    def test_always_clamped(self):
        for hours in np.linspace(0.0, 12.0, 97):
            flow = n2_flow_setpoint(float(hours), 1000.0, 500.0, 5000.0, 4.0, 8.0)
            self.assertTrue(1000.0 <= flow <= 5000.0)


class TestFillRamp(unittest.TestCase):
    def test_fill_ramp(self):
        self.assertEqual(fill_rate_setpoint(0.0, 5.0, 20.0, 1.0), 5.0)
        self.assertEqual(fill_rate_setpoint(0.5, 5.0, 20.0, 1.0), 12.5)
        self.assertEqual(fill_rate_setpoint(1.0, 5.0, 20.0, 1.0), 20.0)
        self.assertEqual(fill_rate_setpoint(0.0, 5.0, 20.0, 0.0), 20.0)


if __name__ == "__main__":
    unittest.main()
