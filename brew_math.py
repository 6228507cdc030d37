class BrewMath:
    # Hydrometer correction polynomial, coefficients defined in Fahrenheit
    HYDROMETER_COEFFS = (1.00130346, -0.000134722124, 0.00000204052596, -0.00000000232820948)

    @staticmethod
    def f_to_c(temp_f):
        return (temp_f - 32.0) * 5.0 / 9.0

    @staticmethod
    def c_to_f(temp_c):
        return 32.0 + temp_c * 9.0 / 5.0

    @staticmethod
    def _density_poly(temp_f):
        c0, c1, c2, c3 = BrewMath.HYDROMETER_COEFFS
        return c0 + c1 * temp_f + c2 * temp_f ** 2 + c3 * temp_f ** 3

    @staticmethod
    def hydrometer_temp_correction(measured_gravity, measured_temp_f, calibration_temp_f):
        # Scale the reading to what the hydrometer would show at its calibration temp
        # Ratio first so equal temps give back the reading exactly
        return measured_gravity * (BrewMath._density_poly(measured_temp_f)
                                   / BrewMath._density_poly(calibration_temp_f))

    @staticmethod
    def calculate_abv(original_gravity, final_gravity):
        """ABV in percentage points (5.0 means 5%).

        Undefined for an original gravity of 1.775, where the denominator is zero
        and ZeroDivisionError is raised.
        """
        og, fg = original_gravity, final_gravity
        return (76.08 * (og - fg) / (1.775 - og)) * (fg / 0.794)
