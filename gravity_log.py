"""
gravity_log.py
Hydrometer reading log: rows, table state and the reducer that keeps the
corrected gravity and ABV columns consistent as readings are typed in.
"""
import copy
import logging
import math
from enum import Enum

from brew_math import BrewMath

logger = logging.getLogger(__name__)

DEFAULT_CALIBRATION_F = 60.0


class TempUnit(Enum):
    FAHRENHEIT = "°F"
    CELSIUS = "°C"

    def toggled(self):
        return TempUnit.CELSIUS if self is TempUnit.FAHRENHEIT else TempUnit.FAHRENHEIT

    def to_fahrenheit(self, value):
        return BrewMath.c_to_f(value) if self is TempUnit.CELSIUS else value

    def from_fahrenheit(self, value_f):
        return BrewMath.f_to_c(value_f) if self is TempUnit.CELSIUS else value_f


class RowField(Enum):
    MEASURED_GRAVITY = "measured_gravity"
    MEASURED_TEMP = "measured_temp"
    HYDROMETER_CAL = "hydrometer_cal"


def parse_decimal(raw):
    """Parse user text into a float, or None when it is blank or not a finite number."""
    if raw is None:
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    return value if math.isfinite(value) else None


def format_number(value):
    # Shortest text for a seeded value: 60.0 -> "60", 15.5555 -> "15.56"
    return f"{round(value, 2):g}"


def format_gravity(value):
    return "" if value is None else f"{value:.3f}"


def format_abv(value):
    return "" if value is None else f"{value:.2f}%"


class GravityRow:
    def __init__(self, id, measured_gravity="", measured_temp="", hydrometer_cal="",
                 corrected_gravity=None, abv=None):
        self.id = id
        # Raw text exactly as typed
        self.measured_gravity = measured_gravity
        self.measured_temp = measured_temp
        self.hydrometer_cal = hydrometer_cal
        # Derived
        self.corrected_gravity = corrected_gravity
        self.abv = abv

    def get_raw(self, field):
        return getattr(self, field.value)

    def set_raw(self, field, raw_text):
        setattr(self, field.value, raw_text)

    def recompute_correction(self, unit):
        gravity = parse_decimal(self.measured_gravity)
        temp = parse_decimal(self.measured_temp)
        cal = parse_decimal(self.hydrometer_cal)
        if gravity is None or temp is None or cal is None:
            self.corrected_gravity = None
            return
        self.corrected_gravity = BrewMath.hydrometer_temp_correction(
            gravity, unit.to_fahrenheit(temp), unit.to_fahrenheit(cal))

    def to_dict(self):
        return {
            "id": self.id,
            "measured_gravity": self.measured_gravity,
            "measured_temp": self.measured_temp,
            "hydrometer_cal": self.hydrometer_cal,
            "corrected_gravity": self.corrected_gravity,
            "abv": self.abv,
        }

    def __repr__(self):
        return f"GravityRow({self.to_dict()!r})"


class GravityTable:
    def __init__(self, rows=None, unit=TempUnit.FAHRENHEIT,
                 default_calibration_f=DEFAULT_CALIBRATION_F, next_id=0):
        self.rows = rows if rows else []
        self.unit = unit
        # Stored in Fahrenheit, rendered in the active unit when seeding rows
        self.default_calibration_f = default_calibration_f
        self.next_id = next_id

    def _blank_row(self):
        return GravityRow(
            id=self.next_id,
            hydrometer_cal=format_number(self.unit.from_fahrenheit(self.default_calibration_f)))

    def new_row(self):
        row = self._blank_row()
        self.next_id += 1
        return row

    def ensure_template(self):
        if not self.rows:
            self.rows.append(self.new_row())

    def display_rows(self):
        """Rows for rendering. An empty table previews the template row it will
        create on first edit, under the same id."""
        if self.rows:
            return list(self.rows)
        return [self._blank_row()]

    def is_template(self, row_index):
        return row_index == len(self.rows) - 1

    def original_gravity(self):
        return self.rows[0].corrected_gravity if self.rows else None

    def recompute_abv(self):
        og = self.original_gravity()
        for row in self.rows:
            row.abv = _abv_or_none(og, row.corrected_gravity)

    def recompute_all(self):
        for row in self.rows:
            row.recompute_correction(self.unit)
        self.recompute_abv()

    def index_of(self, row_id):
        for i, row in enumerate(self.display_rows()):
            if row.id == row_id:
                return i
        return None

    def to_dict(self):
        return {
            "unit": self.unit.value,
            "default_calibration_f": self.default_calibration_f,
            "next_id": self.next_id,
            "rows": [r.to_dict() for r in self.rows],
        }


def _abv_or_none(og, fg):
    if og is None or fg is None:
        return None
    try:
        return BrewMath.calculate_abv(og, fg)
    except ZeroDivisionError:
        # OG of exactly 1.775 is outside the formula's domain
        return None


# --- ACTIONS ---
class EditField:
    def __init__(self, row_index, field, raw_text):
        self.row_index = row_index
        self.field = field
        self.raw_text = raw_text


class SwitchTempUnit:
    pass


class DeleteRow:
    def __init__(self, row_index):
        self.row_index = row_index


class Clear:
    pass


# --- REDUCER ---
def reduce_log(table, action):
    """Return the table that results from applying action; the input is left untouched."""
    state = copy.deepcopy(table)

    if isinstance(action, EditField):
        _edit_field(state, action)
    elif isinstance(action, SwitchTempUnit):
        state.unit = state.unit.toggled()
        state.recompute_all()
    elif isinstance(action, DeleteRow):
        _delete_row(state, action.row_index)
    elif isinstance(action, Clear):
        state.rows = []
    else:
        raise TypeError(f"Unknown gravity log action: {action!r}")
    return state


def _edit_field(state, action):
    idx = action.row_index
    if not 0 <= idx < len(state.display_rows()):
        logger.debug("Ignoring edit of missing row %s", idx)
        return
    state.ensure_template()

    was_template = state.is_template(idx)
    if was_template:
        state.rows.append(state.new_row())

    row = state.rows[idx]
    row.set_raw(action.field, action.raw_text)
    row.recompute_correction(state.unit)
    state.recompute_abv()

    if was_template and action.field is RowField.HYDROMETER_CAL:
        cal = parse_decimal(action.raw_text)
        if cal is not None:
            state.default_calibration_f = state.unit.to_fahrenheit(cal)


def _delete_row(state, idx):
    if not 0 <= idx < len(state.rows) or state.is_template(idx):
        logger.debug("Ignoring delete of row %s (missing or template row)", idx)
        return
    del state.rows[idx]
    if idx == 0:
        state.recompute_abv()
