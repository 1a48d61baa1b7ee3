"""Construct a candidate converter from the name of its output record."""

from flattree.utils.factory import instantiate, module_dict

from . import calo, event, forward, jet, lepton, particle, track

# Build a dictionary of available converters
CONVERTER_DICT = {}
for module in [particle, track, calo, lepton, jet, event, forward]:
    CONVERTER_DICT.update(**module_dict(module))

__all__ = ["converter_factory"]


def converter_factory(class_name, **kwargs):
    """Instantiates the converter of an output record class.

    Parameters
    ----------
    class_name : str
        Name of the output record class (case sensitive)
    **kwargs : dict, optional
        Converter options (`sort_in_place`, `check_consistency`)

    Returns
    -------
    ConverterBase
        Converter instance

    Raises
    ------
    ValueError
        If no converter produces records of this class
    """
    return instantiate(CONVERTER_DICT, class_name, **kwargs)
