from mfmhtml.utils.array import concat, intersperse

__all__ = ["concat", "intersperse"]
