from .vanilla import bs_put, cndf, cndf_array

__all__ = [
    "bs_put",
    "cndf",
    "cndf_array",
]
