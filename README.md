# enigma-research

Calculations for astrological research, in plain Python with no dependencies
beyond the standard library.

## Modules

- `enigma_research.mathextra`: `deg_to_rad`, `rad_to_deg`, and conversion between
  rectangular and polar coordinates (`rectangular_to_polar`, `polar_to_rectangular`,
  and the tuple forms `rectangular_to_polar_values`, `polar_to_rectangular_values`)
  with the dataclasses `PolarCoordinates` and `RectAngCoordinates`.
- `enigma_research.ranges`: `value_to_range` shifts a value by whole range sizes into
  `lower <= value < upper`; it raises `ValueError` for reversed or empty limits.
- `enigma_research.conversion`: `declination_to_longitude`.
- `enigma_research.oblique`: `south_point`, `is_rising`, `oblique_longitude` and
  `oblique_longitudes` for the oblique longitude ("true place") of the School of Ram,
  working on `CelestialPosition` records.
- `enigma_research.elements`: positions of the Earth and the hypothetical bodies
  Persephone, Hermes and Demeter (School of Ram) from orbital elements. `calculate`
  returns longitude, latitude and distance for an `OrbitalBody` and an
  `ObserverPosition`.
- `enigma_research.positions`: the `SinglePosition` and `DoublePosition` records used
  by the analysis modules.
- `enigma_research.harmonics`: `calc_harmonics`.
- `enigma_research.longequiv`: `calc_equivalents` gives longitude equivalents of
  declinations.
- `enigma_research.aspects`: `calc_aspects` with orb factors per point
  (`ConfigPoint`) and per aspect (`ConfigAspect`, which also holds the aspect's
  angular distance); results are `ActualAspect` records.
- `enigma_research.midpoints`: `calc_midpoints`, `effective_midpoint` and
  `calc_occupied_midpoints` for a dial of any size.
- `enigma_research.declmidpoints`: `calc_decl_midpoints`, midpoints in declination.
- `enigma_research.parallels`: `calc_parallels`, parallels and contra-parallels.
- `enigma_research.calendar_checks`: `is_leap_year` and `day_fits_in_month`.
- `enigma_research.randomization`: `get_integers`, `get_integers_with_max` and
  `shuffle`, using the operating system's secure random source.
- `enigma_research.controlgroup`: `create_control_data` and
  `create_multiple_control_data` build control groups of `StandardInputItem`
  records by shuffling the parts (year, day, time, location, ...) of the input data.
- `enigma_research.locations`: `LocationHandler` reads `countries.csv`,
  `cities.csv` and `regions.csv` (semicolon separated) from a data directory,
  `data` by default.
- `enigma_research.timezones`: `actual_time_zone` returns the zone abbreviation and
  UTC offset in seconds for a local moment, from the IANA database via `zoneinfo`.
- `enigma_research.textfiles`: `read_text_lines` and `write_text_lines`.

## Example

```python
from enigma_research.positions import SinglePosition
from enigma_research.midpoints import calc_midpoints
from enigma_research.harmonics import calc_harmonics

points = [
    SinglePosition(id=2, position=12.0),
    SinglePosition(id=3, position=100.0),
    SinglePosition(id=5, position=220.5),
]
for mp in calc_midpoints(points):
    print(mp.point1.id, mp.point2.id, mp.position)   # 56.0, 296.25, 160.25

print(calc_harmonics(points, 2.0))
```

## What it does not do

The package does not calculate positions of the Sun, Moon and planets, house
cusps, Julian day numbers or ayanamshas: it has no ephemeris. Positions for the
analysis functions must come from elsewhere. There is no graphical interface, no
command-line program and no storage of charts; the location data files are not
included and must be supplied.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```