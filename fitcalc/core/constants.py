M_IN_KM = 1000.0
MIN_IN_H = 60.0
CM_IN_M = 100.0
KMH_IN_MSEC = 0.278

# Default distance per repetition, meters
STEP_LENGTH_M = 0.65
SWIMMING_STROKE_LENGTH_M = 1.38

RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER = 18.0
RUNNING_CALORIES_MEAN_SPEED_SHIFT = 1.79

WALKING_CALORIES_WEIGHT_MULTIPLIER = 0.035
WALKING_CALORIES_SPEED_HEIGHT_MULTIPLIER = 0.029

SWIMMING_CALORIES_MEAN_SPEED_SHIFT = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER = 2.0
