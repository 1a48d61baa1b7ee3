"""Functions that instantiate output tree writers from configuration blocks."""

from flattree.utils.factory import instantiate, module_dict

from . import write

WRITER_DICT = module_dict(write)

__all__ = ["writer_factory"]


def writer_factory(writer_cfg):
    """Instantiates a tree writer based on the type specified in the
    configuration under `io.writer.name`. The name must match the name of a
    class under `flattree.io.write`.

    Parameters
    ----------
    writer_cfg : Union[str, dict]
        Writer configuration dictionary

    Returns
    -------
    TreeBase
        Tree writer object
    """
    return instantiate(WRITER_DICT, writer_cfg)
