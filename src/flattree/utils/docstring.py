"""Docstring inheritance utilities."""

__all__ = ["inherit_docstring"]


def inherit_docstring(*parents):
    """Inherits the attribute docstring block of one or more parent classes.

    Only handles numpy-style docstrings. The attributes of the parents are
    prepended to the `Attributes` block of the decorated class.

    Parameters
    ----------
    *parents : List[object]
        Parent class(es) to inherit attributes from

    Returns
    -------
    callable
        Class with updated docstring
    """

    def inherit(obj):
        tab = "    "
        underline = "----"
        header = f"Attributes\n{tab}----------\n"

        # If there is no attribute block yet, add the header
        if header not in obj.__doc__:
            obj.__doc__ = obj.__doc__.rstrip() + f"\n\n{tab}{header}"

        # Get the parent attribute docstring blocks
        prestr = ""
        for parent in parents:
            substr = parent.__doc__.split(header)[-1].rstrip() + "\n"
            if len(substr.split(underline)) > 1:
                substr = substr.split(underline)[0].split("\n")[:-1]
                substr = "\n".join(substr).rstrip() + "\n"

            prestr += substr

        # Append it to the relevant block
        split_doc = obj.__doc__.split(header)
        obj.__doc__ = split_doc[0] + header + prestr + split_doc[1]

        return obj

    return inherit
