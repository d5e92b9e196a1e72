"""
The `constants` module defines the angular constants and frame-defining
quantities used by skyframes.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

"""
Constant to convert arcseconds to radians. Equal to 2pi/(360*3600). Units: *rad/as*
"""
AS2RAD = 2.0 * PI / 360.0 / 3600.0

"""
Constant to convert radians to arcseconds. Equal to (360*3600)/(2pi). Units: *as/rad*
"""
RAD2AS = 360.0 * 3600.0 / PI / 2.0

"""
Number of degrees in one hour of right ascension. Equal to 360/24. Units: *deg/h*
"""
HOUR2DEG = 15.0

# Frame Constants
"""
Right ascension of the north galactic pole (J2000, ICRS). Units: *deg*

References:

1. ESA, *The Hipparcos and Tycho Catalogues*, SP-1200, Vol. 1, 1997, Sec. 1.5.3
"""
GALACTIC_POLE_RA = 192.85948

"""
Declination of the north galactic pole (J2000, ICRS). Units: *deg*

References:

1. ESA, *The Hipparcos and Tycho Catalogues*, SP-1200, Vol. 1, 1997, Sec. 1.5.3
"""
GALACTIC_POLE_DEC = 27.12825

"""
Galactic longitude of the ascending node of the galactic plane on the
equator. Units: *deg*

References:

1. ESA, *The Hipparcos and Tycho Catalogues*, SP-1200, Vol. 1, 1997, Sec. 1.5.3
"""
GALACTIC_NODE_LON = 32.93192

"""
Obliquity of the ecliptic at J2000 adopted by Hipparcos. Units: *as*

References:

1. ESA, *The Hipparcos and Tycho Catalogues*, SP-1200, Vol. 1, 1997, Sec. 1.5.3
"""
OBLIQUITY_J2000 = 84381.448
