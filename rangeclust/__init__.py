"""Point clouds, poses, bounding boxes, KITTI readers, PCD writers, Euclidean
clustering, and command-line argument definitions with DocBook output."""

__version__ = "0.1.0"