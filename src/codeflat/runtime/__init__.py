from codeflat.runtime.runner import flatten, flatten_into

__all__ = ['flatten', 'flatten_into']
