from setuptools import find_packages, setup

version = "0.1.0"

setup(
    name="phasius",
    version=version,
    python_requires=">=3.11",
    description="Phasius: map phase blocks across bam, cram and vcf files",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    entry_points={
        "console_scripts": ["phasius=phasius.__main__:main"],
    },
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["pysam>=0.22", "plotly>=5.18"],
    extras_require={"test": ["pytest"]},
    keywords=[
        "bioinformatics",
        "phasing",
        "haplotype",
        "phase block",
        "visualization",
    ],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.11",
    ],
)
