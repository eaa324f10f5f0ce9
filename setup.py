from setuptools import setup, find_packages

import codecs
import os.path
import os

PACKAGE = "fnkit"
VERSION = "0.1.0"

# For daily snapshot versioning mode:
if os.environ.get("_SNAPSHOT_BUILD", None) is not None:
    import datetime
    VERSION = VERSION + datetime.datetime.now().strftime(".%Y%m%d")


def read(path):
    return codecs.open(os.path.join(os.path.dirname(__file__), path), 'r',
                       'utf-8').read()


setup(name=PACKAGE,
      version=VERSION,
      description=("Higher-order function utilities: template functions, "
                   "wrappers, memoization, deferred calls and constants"),
      long_description=read("README.rst"),
      author="fnkit developers",
      license="GPLv3+",
      packages=find_packages(),
      include_package_data=True,
      python_requires=">=3.9",
      extras_require=dict(test=["pytest"]),
      classifiers=["Programming Language :: Python :: 3",
                   "License :: OSI Approved :: "
                   "GNU General Public License v3 or later (GPLv3+)",
                   "Topic :: Software Development :: Libraries"])

# vim:sw=4:ts=4:et:
