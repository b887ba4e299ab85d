#!/usr/bin/env python3
"""
Shared constants for the Blackbody Spectrum simulation.

Units: wavelengths in nanometers [nm], temperatures in kelvin [K], intensities in SI
unless stated otherwise. Keeping constants in one place helps ensure values are
consistent across the codebase and makes tuning easier.
"""

# Radiation constants
FIRST_RADIATION_CONSTANT = 1.191042e-16  # 2hc^2 in W m^2 / sr
SECOND_RADIATION_CONSTANT = 1.438770e7  # hc/k in nm K
WIEN_CONSTANT = 2.897773e-3  # m K
STEFAN_BOLTZMANN_CONSTANT = 5.670373e-8  # W / (m^2 K^4)

# Above this exponent Planck switches from expm1(x) to the exp(x) Wien tail
MAX_EXPONENT = 700.0

# Color sampling wavelengths (nm)
RED_WAVELENGTH = 650.0
GREEN_WAVELENGTH = 550.0
BLUE_WAVELENGTH = 450.0

# Visual calibration of the renormalized temperature (not physical bounds)
RENORMALIZATION_MIN_TEMPERATURE = 700.0  # color of star and circles turns on
RENORMALIZATION_MAX_TEMPERATURE = 3000.0  # color of star and circles maxes out
RENORMALIZATION_POWER_EXPONENT = 0.7
COLOR_SCALE_FACTOR = 1.0

# Glowing star halo
GLOWING_STAR_HALO_MIN_RADIUS = 5.0  # px
GLOWING_STAR_HALO_MAX_RADIUS = 40.0  # px
GLOWING_STAR_HALO_MAX_ALPHA = 0.1

# Thermometer temperature values
MIN_TEMPERATURE = 270.0
MAX_TEMPERATURE = 11000.0
EARTH_TEMPERATURE = 300.0
LIGHT_BULB_TEMPERATURE = 3000.0
SUN_TEMPERATURE = 5778.0
SIRIUS_A_TEMPERATURE = 9940.0
DEFAULT_TEMPERATURE = SUN_TEMPERATURE
THERMOMETER_SNAP_INTERVAL = 50.0  # K
THERMOMETER_TUBE_HEIGHT = 400.0  # px

# Electromagnetic band upper boundaries (nm)
XRAY_WAVELENGTH = 10.0
ULTRAVIOLET_WAVELENGTH = 400.0
VISIBLE_WAVELENGTH = 700.0
INFRARED_WAVELENGTH = 100000.0

# Saved graphs
SAVED_HISTORY_CAPACITY = 2

# Graph sampling and axes
GRAPH_NUMBER_POINTS = 300
DEFAULT_WAVELENGTH_MAX = 3000.0  # nm
HORIZONTAL_ZOOM_FACTOR = 2.0
MIN_HORIZONTAL_ZOOM = 750.0  # nm
MAX_HORIZONTAL_ZOOM = 12000.0  # nm
VERTICAL_ZOOM_FACTOR = 10 ** 0.5
DEFAULT_VERTICAL_ZOOM = 300.0  # MW / m^2 / um
MIN_VERTICAL_ZOOM = 10.0
MAX_VERTICAL_ZOOM = 1000.0
AXES_WIDTH = 550  # px
AXES_HEIGHT = 400  # px
WAVELENGTH_PER_TICK = 50.0  # nm
MINOR_TICKS_PER_MAJOR_TICK = 5

# Radiance model units (W / m^2 / sr / nm) to graph units (MW / m^2 / um)
RADIANCE_TO_GRAPH_UNITS = 1e33

# Star shape
STAR_OUTER_RADIUS = 35.0  # px
STAR_INNER_RADIUS = 20.0  # px
STAR_POINTS = 9

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 700
BACKGROUND_COLOR = (0, 0, 0)
AXES_COLOR = (255, 255, 255)
TICK_COLOR = (200, 200, 200)
GRAPH_COLOR = (255, 255, 0)
SAVED_GRAPH_COLORS = ((180, 180, 180), (120, 170, 255))
GRAPH_POINT_COLOR = (0, 200, 255)
THERMOMETER_COLOR = (200, 200, 200)
THERMOMETER_FLUID_COLOR = (255, 60, 60)
LABEL_COLOR = (230, 230, 230)
