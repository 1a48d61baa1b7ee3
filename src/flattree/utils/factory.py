"""Contains functions needed to instantiate a class from a dictionary.

This allows to generically convert a YAML block into an instatiated class
with all the appropriate checks that the class exists and is provided
with appropriate arguments.
"""

from copy import deepcopy

from .logger import logger


def module_dict(module):
    """Converts module into a dictionary which maps names onto classes.

    Classes which define a non-empty `name` attribute are only reachable
    through that name (and their `aliases`, if any). Classes which do not
    are stored under their class name.

    Parameters
    ----------
    module : module
        Module from which to fetch the classes

    Returns
    -------
    dict
        Dictionary which maps acceptable class names to classes themselves
    """
    # Loop over classes/functions in the module
    module_dict = {}
    cls_names = getattr(module, "__all__", dir(module))
    for cls_name in cls_names:
        # Skip private objects
        if cls_name[0] == "_":
            continue

        # Only consider classes which belong to the module of interest
        cls = getattr(module, cls_name)
        if not isinstance(cls, type) or module.__name__ not in cls.__module__:
            continue

        # Store the class under its public name, if it has one
        if getattr(cls, "name", ""):
            module_dict[cls.name] = cls
        else:
            module_dict[cls_name] = cls

        # Register the aliases, if any
        for al in getattr(cls, "aliases", ()):
            module_dict[al] = cls

    return module_dict


def instantiate(module_dict, cfg, **kwargs):
    """Instantiates a class based on a configuration dictionary and a list of
    possible classes to chose from.

    This function supports two YAML configuration structures
    (parsed as a dictionary):

    .. code-block:: yaml

        writer:
          name: hdf5
          file_name: output.h5

    or

    .. code-block:: yaml

        writer:
          name: hdf5
          kwargs:
            file_name: output.h5

    Parameters
    ----------
    module_dict : dict
        Dictionary which maps a class name onto an object class.
    cfg : Union[str, dict]
        Configuration dictionary, or simply the name of the class
    **kwargs : dict, optional
        Additional parameters to pass to the function

    Returns
    -------
    object
        Instantiated object
    """
    # If the configuration is a string, assume it is a class name with no
    # parameters to be passed to it
    if isinstance(cfg, str):
        cfg = {"name": cfg}

    # Get the name of the class, check that it exists
    config = deepcopy(cfg)
    assert "name" in config, "Could not find the name of the class under `name`"
    class_name = config.pop("name")

    # Check that the class we are looking for exists
    if class_name not in module_dict:
        valid_keys = list(module_dict.keys())
        raise ValueError(
            f"Could not find '{class_name}' in the dictionary "
            f"which maps names to classes. Available names: "
            f"{valid_keys}"
        )

    # Gather the keyword arguments to pass to the class
    kwargs = dict(config.pop("kwargs", {}), **kwargs)

    # If some arguments were specified at the top level, append them
    for key in config.keys():
        assert key not in kwargs, (
            f"The keyword argument {key} is provided "
            "at the top level and under `kwargs`. Ambiguous."
        )
    kwargs.update(config)

    # Intialize
    cls = module_dict[class_name]
    try:
        return cls(**kwargs)

    except Exception as err:
        logger.error(
            f"Failed to instantiate {cls.__name__} with these arguments:\n"
            f"  - kwargs: {kwargs}"
        )

        raise err
