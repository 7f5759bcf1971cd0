import numpy

FeatureVector = numpy.ndarray[tuple[int], numpy.dtype[numpy.float64]]
"""0-indexed feature vector for a single sample"""

FeatureMatrix = numpy.ndarray[tuple[int, int], numpy.dtype[numpy.float64]]
"""0-indexed feature matrix for multiple samples, one row per sample"""

LabelVector = numpy.ndarray[tuple[int], numpy.dtype[numpy.int64]]
"""0-indexed class labels, densely encoded as 0, 1, ..., K-1"""
