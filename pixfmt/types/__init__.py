from .bit_depth import BitDepth, max_raw, min_raw, depth_dtypes, work_dtypes, depth_valid_dtypes

__all__ = ["BitDepth", "max_raw", "min_raw", "depth_dtypes", "work_dtypes", "depth_valid_dtypes"]
