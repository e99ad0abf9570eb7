"""Global constants shared by the reconstruction algorithms."""

# Index of the first TPC layer in the global layer numbering
# (MVTX: 0-2, INTT: 3-6, TPC: 7-54)
TPC_LAYER_OFFSET = 7

# Number of readout layers in each TPC region
TPC_N_REGION_LAYERS = 16

# Default TPC region boundary radii (cm)
TPC_INNER_MIN_RADIUS = 30.0
TPC_MID_MIN_RADIUS = 40.0
TPC_OUTER_MIN_RADIUS = 60.0
TPC_OUTER_MAX_RADIUS = 76.4

# Minimum number of TPC clusters needed to fit a circle
MIN_CIRCLE_FIT_POINTS = 3

# Maximum distance (cm) along x and y between a cluster and the `+`
# circle-circle intersection for that solution to be selected
INTERSECTION_TOLERANCE = 5.0

# Number of chips in an MVTX inner barrel module and index of the central chip
MVTX_N_CHIPS = 9
MVTX_CENTRAL_CHIP = 4

# Tolerance (cm) used to snap local coordinates onto the active matrix edges
MVTX_EDGE_EPS = 5e-6

# Default MVTX frame offsets (cm), from the stave construction geometry
MVTX_SENSOR_IN_CHIP = (0.058128, -0.0005, 0.0)
MVTX_CHIP_IN_MODULE = (
    (0.0275, -0.02075, -12.060),
    (0.0275, -0.02075, -9.0450),
    (0.0275, -0.02075, -6.0300),
    (0.0275, -0.02075, -3.0150),
    (0.0275, -0.02075, 0.0),
    (0.0275, -0.02075, 3.0150),
    (0.0275, -0.02075, 6.0300),
    (0.0275, -0.02075, 9.0450),
    (0.0275, -0.02075, 12.060),
)

# ALPIDE chip segmentation (cm)
ALPIDE_N_ROWS = 512
ALPIDE_N_COLS = 1024
ALPIDE_PITCH_ROW = 26.88e-4
ALPIDE_PITCH_COL = 29.24e-4
ALPIDE_SENSOR_THICKNESS = 30e-4
ALPIDE_PASSIVE_EDGE_READOUT = 0.12
ALPIDE_PASSIVE_EDGE_TOP = 37.44e-4
ALPIDE_PASSIVE_EDGE_SIDE = 29.12e-4

# Default generator-level trigger parameters
TRIGGER_ETA_MAX = 1.1
JET_RADIUS = 0.4
INVISIBLE_PDG_RANGE = (12, 18)
