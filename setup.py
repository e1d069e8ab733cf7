import setuptools
from pathlib import Path

# Read the contents of README file
this_directory = Path(__file__).parent
readme_text = (this_directory / "README.md").read_text()
requirements = (this_directory / "requirements.txt").read_text().splitlines()

setuptools.setup(
    include_package_data=True,
    name="enumbuilder",
    version="0.1.0",
    description="named, immutable enum tables built at runtime",
    package_data={"enumbuilder": ["py.typed"]},
    packages=setuptools.find_packages(include=["enumbuilder", "enumbuilder.*"]),
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "enumq = enumbuilder.enum_utils:enumq",
        ]
    },
    long_description=readme_text,  # Provide entire contents of README to long_description
    long_description_content_type="text/markdown",
)
