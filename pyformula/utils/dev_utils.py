def docstring_from(func, custom_doc=""):
    """Copy the docstring of another function."""

    def decorator(target_func):
        doc = func.__doc__ or ""
        target_func.__doc__ = f"{custom_doc}\n\n{doc}" if custom_doc else doc
        return target_func

    return decorator
