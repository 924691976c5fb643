"""
These parameters control the domain partitioning of the Rys root/weight engine and the
pre-calculation of the tables used by the boundary asymptotics and the polynomial fits.
"""

# this file holds the pre-calculated tables, it will be generated on the fly and is controlled by
# the parameters given below
_f_name = "rys_tables.py"

# format version of the table file, an existing file with a different version is regenerated
table_version = 2

# working precision (bits) of the table generator, guard bits of the moment problem are added on top
table_bits = 96

# highest order supported by the full-range and the short-range (lower > 0) routines
MAX_ORDER = 32
SR_MAX_ORDER = 24

# below SMALLX_LIMIT the rule is linear in x
SMALLX_LIMIT = 3e-7

# at and above LARGEX_BASE + LARGEX_STEP * order the rule takes its asymptotic form
LARGEX_BASE = 35
LARGEX_STEP = 5

# x-breakpoint between the Jacobi and the Laguerre variant for orders above POLYFIT_MAX_ORDER
FULL_RANGE_BREAKPOINT = 50

# orders covered by the Chebyshev fits
POLYFIT_MIN_ORDER = 6
POLYFIT_MAX_ORDER = 14

# Chebyshev terms per root and weight on each interval
POLYFIT_TERMS = 14

# dense intervals of width POLYFIT_DENSE_WIDTH up to POLYFIT_DENSE_LIMIT,
# coarse intervals of width POLYFIT_COARSE_WIDTH above
POLYFIT_DENSE_WIDTH = 2.5
POLYFIT_DENSE_LIMIT = 40
POLYFIT_COARSE_WIDTH = 4

# lanes with x * theta beyond this value do not contribute (exp(-40) ~ 4e-18)
EXPCUTOFF_SR = 40

# extra bits per moment (and a fixed amount) used to form modified moments
GUARD_BITS_PER_MOMENT = 5
GUARD_BITS = 32

# Newton steps polishing the eigenvalues of the Jacobi matrix
NEWTON_STEPS = 2

# step used for the x-derivative of the small-x rule
SMALLX_FD_STEP = 1e-30

# if True, a fatal failure is logged and the process exits, otherwise an exception is raised
abort_on_failure = False
