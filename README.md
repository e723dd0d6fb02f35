# rangeclust

Building blocks for processing 3D lidar scans: points and clouds, poses,
bounding boxes, KITTI readers, PCD writers and Euclidean clustering. The
package also has a small set of classes for defining command-line arguments
and writing their usage as DocBook.

## Install

```
pip install rangeclust
```

## What is in it

- `rangeclust.radians`: `Radians`, an immutable angle, and the helpers `deg()`
  and `rad()`. The `<` and `>` comparisons allow for single-precision float
  noise. Angles support `+`, `-`, scaling and division. `normalize(start, end)`
  shifts an angle into a range, which defaults to 0 to 360 degrees.
- `rangeclust.rich_point`: `RichPoint`, holding `x`, `y`, `z` and a `ring`
  index in `0..65535`. It also provides `dist_to_sensor_2d()` and
  `dist_to_sensor_3d()`.
- `rangeclust.pose`: `Pose`, a rigid transform stored as a 4x4 matrix.
  - `Pose(x, y, theta)` builds a planar pose.
  - `from_matrix` and `from_vector6` build a pose, and `to_vector6` gives the
    vector back.
  - `transform_point` applies the transform to a point.
  - `in_local_frame_of` and `to_local_frame_of` express a pose relative to
    another one.
  - `likelihood` must lie in `[0, 1]`.
- `rangeclust.cloud`: `Cloud`, a list of `RichPoint` with a `pose` and a
  `sensor_pose`.
  - `append` adds a point and `resize` truncates or pads the list.
  - `copy` makes a deep copy.
  - `transform` and `transform_in_place` move the points.
  - `as_array` returns the coordinates as an `(n, 3)` array.
- `rangeclust.bbox`: `Bbox`, an axis-aligned box.
  - `Bbox.from_cloud` fits a box around a cloud.
  - `intersect` and `intersects` handle overlap, and `move_by(pose)` moves the
    box.
  - Each box has a `volume`, `center` and `scale`. A box without positive
    extent on some axis has volume `Bbox.WRONG_VOLUME` (-1).
- `rangeclust.timer`: `Timer`, a stopwatch that restarts each time it is read.
  `measure` returns microseconds by default, or milliseconds with
  `Units.MILLI`.
- `rangeclust.folder_reader`: `FolderReader` lists the files in a folder by
  prefix and suffix.
  - With `Order.SORTED` the files are ordered by the last number in each path.
  - `num_from_string` is the helper that finds that number.
  - Paths are handed out by `next_file_path()`, which returns `None` when none
    are left, or by iterating over the reader.
  - A missing folder raises `FileNotFoundError`.
- `rangeclust.velodyne_utils`: readers for KITTI-style data.
  - `read_kitti_cloud` reads binary little-endian `x y z intensity` float
    records and drops the intensity.
  - `read_kitti_cloud_txt` reads four space-separated values per line and
    skips malformed lines.
  - `mat_from_depth_png` loads a 16-bit depth PNG as float32 meters, in units
    of 1/500 m.
  - `fix_kitti_depth` applies the per-row range corrections in
    `MOOSMAN_CORRECTIONS`. Images may have at most 64 rows.
- `rangeclust.cloud_saver`: binary PCD output.
  - `write_pcd_binary` writes the fields `x y z label`, where the label is the
    ring index.
  - `CloudSaver` writes each cloud it receives to `<prefix>_<N>.pcd`.
  - `VectorCloudSaver` writes every `save_every`-th set of clusters into a new
    folder named `<prefix>_NNNNNN`, as `cloud_NNNNNN.pcd` files. A folder that
    already exists is skipped.
- `rangeclust.clusterers`: Euclidean clustering, built on SciPy's k-d tree.
  - `extract_euclidean_clusters` returns lists of point indices, largest
    cluster first.
  - `EuclideanClusterer.process(cloud)` handles only every `skip`-th cloud and
    returns `{}` for the others. For a handled cloud it returns a dict that
    maps a rank (0 for the largest cluster) to a `Cloud`.
- `rangeclust.object_storer`: `ObjectPtrStorer` keeps the latest clusters
  behind a lock and tells an `UpdateListener` when new ones arrive.
  - `cluster_center_and_extent` computes where a box for a cluster would go.
  - `cube_style` picks its colour and line width: small objects, under
    30 m³ with every side under 6 m, are highlighted.
- Command-line toolkit:
  - `rangeclust.cmdline_errors`: the `ArgException` family and
    `ExitException`.
  - `rangeclust.cmdline_constraints`: `Constraint` and `ValuesConstraint`.
  - `rangeclust.cmdline_arg`: the abstract `Arg` base class, `Visitor`,
    `OptionalUnlabeledTracker` and `extract_value`.
  - `rangeclust.cmdline_xor`: `XorHandler` for mutually exclusive arguments.
  - `rangeclust.cmdline_docbook`: the `CmdLineInterface` and `CmdLineOutput`
    interfaces, `DocBookOutput` and `VersionVisitor`.

## Example

```python
from rangeclust.folder_reader import FolderReader, Order
from rangeclust.velodyne_utils import read_kitti_cloud
from rangeclust.clusterers import EuclideanClusterer
from rangeclust.cloud_saver import VectorCloudSaver

reader = FolderReader("scans", ".bin", order=Order.SORTED)
clusterer = EuclideanClusterer(cluster_tolerance=0.2, min_cluster_size=100,
                               max_cluster_size=25000, skip=1)
saver = VectorCloudSaver("clusters")

for path in reader:
    cloud = read_kitti_cloud(path)
    clusters = clusterer.process(cloud)
    saver.on_new_object_received(clusters, 0)
```

## What it does not do

- **No commands.** The package installs no programs.
- **No viewer.** Nothing draws clouds or clusters on screen. `object_storer`
  only stores clusters and computes box placement and style.
- **No range-image projection and no image-based clustering.** A `Cloud`
  carries no projection. The only clusterer is `EuclideanClusterer`.
- **No complete argument parser.** The command-line modules provide the `Arg`
  base class, exclusive groups, constraints and DocBook usage output. There
  are no concrete switch or value argument classes and no `CmdLineInterface`
  implementation that parses a command line. To use them, subclass `Arg` and
  `CmdLineInterface`.

## Tests

```
pip install rangeclust[test]
pytest
```