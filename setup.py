# -*- coding: utf-8 -*-
from setuptools import setup

package_dir = \
{'': 'python'}

packages = \
['clatd',
 'clatd.config',
 'clatd.datamodel',
 'clatd.datamodel.types',
 'clatd.utils',
 'clatd.utils.modeling',
 'clatd.utils.modeling.types']

install_requires = \
['dnspython>=2.0', 'psutil', 'pyyaml']

extras_require = \
{'test': ['pytest']}

entry_points = \
{'console_scripts': ['clatd = clatd.main:main']}

setup_kwargs = {
    'name': 'clatd',
    'version': '1.0.0',
    'description': 'CLAT daemon configuration - local endpoint, PLAT prefix and checksum-neutral address setup for 464xlat',
    'long_description': "# clatd\n\nLocal endpoint configuration of a 464xlat CLAT daemon: the local IPv4 subnet,\nthe PLAT prefix (static or discovered via DNS64, RFC 7050) and a checksum-neutral\nlocal IPv6 address.\n",
    'long_description_content_type': 'text/markdown',
    'package_dir': package_dir,
    'packages': packages,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'entry_points': entry_points,
    'python_requires': '>=3.9,<4.0',
}

setup(**setup_kwargs)


# This setup.py was autogenerated using Poetry for backward compatibility with setuptools.
