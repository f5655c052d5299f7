from setuptools import setup

setup(
    name="nestify",
    version="0.1.0",
    provides=["nestify"],
    description='Incremental reporting for hierarchical test runs',
    classifiers=[
        "Programming Language :: Python",
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Apache Software License",
        "Topic :: Software Development :: Testing",
        "Intended Audience :: Developers",
        "Development Status :: 4 - Beta",
    ],
    install_requires=[],
    extras_require={
        'test': ['mock', 'pytest'],
    },
    python_requires='>=3.8',
    packages=["nestify", "nestify.backends", "nestify.utils"],
    scripts=['bin/nestify'],
    long_description="""nestify - Incremental reporting for hierarchical test runs

nestify renders the progress of a run of nested test groups as it happens, without knowing the
shape of the test tree in advance:

  - quiet by default: groups whose tests all pass print nothing at all.
  - a failing test brings out the headers of the groups around it, each exactly once.
  - log output produced during a test is held back and shown only next to a failure.
  - one reporting policy shared by a terminal backend (color!) and an HTML backend.
  - replay a recorded stream of run events from the command line.
"""
)
