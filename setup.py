from setuptools import setup

with open("README.md") as f:
    readme = f.read()

about = {}
with open("osm_route_planner/_version.py") as f:
    exec(f.read(), about)

setup(
    name=about["__title__"],
    version=about["__version__"],
    description=about["__description__"],
    long_description=readme,
    long_description_content_type="text/markdown",
    author=about["__author__"],
    license=about["__license__"],
    packages=[
        "osm_route_planner",
        "osm_route_planner.maps",
        "osm_route_planner.routing",
        "osm_route_planner.observer",
    ],
    install_requires=[
        "openlr==1.0.1",
        "geographiclib",
        "shapely",
        "numpy",
    ],
    test_suite="tests",
    python_requires=">=3.8",
    classifiers=[
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Scientific/Engineering :: GIS",
    ],
)
