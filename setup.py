import os
from pathlib import Path
from setuptools import setup, find_packages


def get_files_in_folder(directory):
    """Helper function to get all files in a specific directory."""
    file_list = []
    for path, _, fnames in os.walk(directory):
        for filename in fnames:
            file_list.append(os.path.join("..", path, filename))
    return file_list


project_name = "voxnav"

data_dir = os.path.join(project_name, "data")
install_requires = [
    "matplotlib",
    "numpy",
    "PyYAML",
    "scipy",
    "typing_extensions",
]

# This will gracefully fall back to an empty string if the README.md cannot be read.
readme_path = Path(__file__).parent / "README.md"
readme_text = readme_path.read_text() if readme_path.exists() else ""

setup(
    name=project_name,
    version="0.1.0",
    description="Weighted graph A* pathfinding for agents navigating 3D voxel worlds.",
    long_description=readme_text,
    long_description_content_type="text/markdown",
    license="MIT",
    install_requires=install_requires,
    packages=find_packages(include=[project_name, f"{project_name}.*"]),
    package_data={project_name: get_files_in_folder(data_dir)},
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
    zip_safe=True,
)
