import unittest

from desi_nutri.utils.health_calc import bmi_category, calculate_bmi


class TestHealthCalc(unittest.TestCase):

    def test_calculate_bmi(self):
        self.assertEqual(calculate_bmi(70, 175), 22.9)
        self.assertEqual(calculate_bmi(50, 160), 19.5)

    def test_missing_measurements(self):
        self.assertIsNone(calculate_bmi(None, 170))
        self.assertIsNone(calculate_bmi(70, None))
        self.assertIsNone(calculate_bmi(70, 0))

    def test_categories(self):
        self.assertEqual(bmi_category(17.0), "Underweight")
        self.assertEqual(bmi_category(18.5), "Normal")
        self.assertEqual(bmi_category(24.9), "Normal")
        self.assertEqual(bmi_category(25.0), "Overweight")
        self.assertEqual(bmi_category(29.9), "Overweight")
        self.assertEqual(bmi_category(30.0), "Obese")


if __name__ == '__main__':
    unittest.main()
