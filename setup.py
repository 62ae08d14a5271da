import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="termnotes",
    version="0.0.1",
    description="A small terminal menu for keeping short notes in a comma-delimited file.",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    packages=setuptools.find_packages('src'),
    package_dir={'': 'src'},
    entry_points={
        'console_scripts': [
            'termnotes = termnotes.cli:main'
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        'rich>=10.0',
        'terminaltables',
    ],
    extras_require={
        'test': [
            'pyfakefs',
            'pytest',
            'pytest-mock',
        ]
    },
    python_requires='>=3.7',
)
