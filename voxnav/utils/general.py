"""General package utilities."""

import pathlib


def get_data_folder() -> pathlib.Path:
    """
    Get a path to the folder containing data.

    This is the ``data`` folder installed alongside the ``voxnav`` package.

    :return: Path to data folder.
    """
    return pathlib.Path(__file__).parent.parent / "data"
