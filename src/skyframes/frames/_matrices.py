"""Fixed rotation matrices between the galactic, ICRS and ecliptic frames.

The matrices were computed once from the Hipparcos frame definitions and
are stored here as literal constants:

- ``ICRS -> galactic = Rz(-l_omega) Rx(90 - dec_G) Rz(90 + ra_G)`` with the
  north galactic pole at ``ra_G = 192.85948``, ``dec_G = 27.12825`` and the
  ascending node at ``l_omega = 32.93192`` (degrees).
- ``ICRS -> ecliptic = Rx(eps)`` with ``eps = 84381.448`` arcseconds.
- ``galactic -> ecliptic = (ICRS -> ecliptic)(galactic -> ICRS)``.

Each reverse matrix is the transpose of its forward matrix.

References:
    1. ESA, *The Hipparcos and Tycho Catalogues*, SP-1200, Vol. 1, 1997,
       Sec. 1.5.
    2. C. A. Murray, *Vectorial Astrometry*, 1983, Sec. 10.2.
    3. W. F. van Altena (ed.), *Astrometry for Astrophysics*, 2012,
       Ch. 4.5.
"""

ICRS_TO_GALACTIC = (
    (-0.0548755604162157, -0.8734370902348851, -0.4838350155487132),
    (+0.4941094278755837, -0.4448296299600112, +0.7469822444972190),
    (-0.8676661490190047, -0.1980763734312013, +0.4559837761750671),
)

GALACTIC_TO_ICRS = (
    (-0.0548755604162157, +0.4941094278755837, -0.8676661490190047),
    (-0.8734370902348851, -0.4448296299600112, -0.1980763734312013),
    (-0.4838350155487132, +0.7469822444972190, +0.4559837761750671),
)

ICRS_TO_ECLIPTIC = (
    (1.0, 0.0, 0.0),
    (0.0, +0.9174820620691818, +0.3977771559319137),
    (0.0, -0.3977771559319137, +0.9174820620691818),
)

ECLIPTIC_TO_ICRS = (
    (1.0, 0.0, 0.0),
    (0.0, +0.9174820620691818, -0.3977771559319137),
    (0.0, +0.3977771559319137, +0.9174820620691818),
)

GALACTIC_TO_ECLIPTIC = (
    (-0.0548755604162157, +0.4941094278755837, -0.8676661490190047),
    (-0.9938213790616488, -0.1109907334174411, -0.0003515899048313),
    (-0.0964766261278291, +0.8622858750901131, +0.4971471917159637),
)

ECLIPTIC_TO_GALACTIC = (
    (-0.0548755604162157, -0.9938213790616488, -0.0964766261278291),
    (+0.4941094278755837, -0.1109907334174411, +0.8622858750901131),
    (-0.8676661490190047, -0.0003515899048313, +0.4971471917159637),
)
