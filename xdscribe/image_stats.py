"""Classification of sampling images by their location distribution."""

from __future__ import annotations

from collections import Counter

from xdscribe.locations import Location
from xdscribe.sampling import Sampling
from xdscribe.sparse_raster import raster_capacity
from xdscribe.stats import ImageType, global_stats

_MOSTLY = {
    Location.OUTER: ImageType.MOSTLY_EMPTY,
    Location.BOUNDARY: ImageType.MOSTLY_BOUNDARY,
    Location.INNER: ImageType.MOSTLY_FILLED,
}
_FULLY = {
    Location.OUTER: ImageType.FULLY_EMPTY,
    Location.BOUNDARY: ImageType.FULLY_BOUNDARY,
    Location.INNER: ImageType.FULLY_FILLED,
}


def report_sampling_distribution(sampling: Sampling) -> None:
    """Report the sampling size, its grid share and its image type to the stats."""
    counters = Counter(Location(v.value) for v in sampling.voxels())
    sampling_size = sum(counters.values())

    stats = global_stats()
    stats.sampling_size.report(sampling_size)
    stats.sampling_to_grid_ratio.report(
        sampling_size / raster_capacity(sampling.raster_size)
    )

    undefined = True
    for location in Location:
        count = counters[location]
        if count > sampling_size * 2 // 3:
            stats.images.report(_FULLY[location])
            undefined = False
        elif count > sampling_size // 2:
            stats.images.report(_MOSTLY[location])
            undefined = False

    if undefined:
        stats.images.report(ImageType.UNDEFINED)