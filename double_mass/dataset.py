"""
double_mass.dataset
~~~~~~~~~~~~~~~~~~~
Annual rainfall (mm) at Station A and the mean of ten surrounding
stations, 1990-2019.
"""

from __future__ import annotations

from .series import Observation, as_observations

# (year, Station A, 10-station average)
SAMPLE_RAINFALL = [
    (1990, 677, 780), (1991, 579, 660), (1992, 96, 110), (1993, 463, 520),
    (1994, 473, 540), (1995, 700, 800), (1996, 480, 540), (1997, 432, 490),
    (1998, 494, 560), (1999, 504, 575), (2000, 416, 480), (2001, 532, 600),
    (2002, 505, 580), (2003, 829, 950), (2004, 680, 770), (2005, 1243, 1400),
    (2006, 998, 1140), (2007, 572, 650), (2008, 595, 646), (2009, 374, 350),
    (2010, 634, 590), (2011, 496, 490), (2012, 385, 400), (2013, 437, 390),
    (2014, 567, 570), (2015, 355, 377), (2016, 684, 653), (2017, 824, 787),
    (2018, 425, 410), (2019, 611, 588),
]


def load_sample_observations() -> list[Observation]:
    """Return :data:`SAMPLE_RAINFALL` as :class:`Observation` instances."""
    return as_observations(SAMPLE_RAINFALL)
