"""Integrates appfs with Python's setuptools."""

from pathlib import Path

from setuptools import setup, find_packages

ROOT_DIRECTORY_PATH = Path(__file__).resolve().parent

with open(ROOT_DIRECTORY_PATH / 'appfs' / 'assets' / 'VERSION', encoding='utf-8') as f:
    VERSION = f.read().strip()

with open(ROOT_DIRECTORY_PATH / 'README.md', encoding='utf-8') as f:
    long_description = f.read()


extras_require_setuptools = [
    'setuptools ~= 68.2, >= 68.2.2',
    'twine ~= 4.0, >= 4.0.0',
    'wheel ~= 0.40, >= 0.40.0',
]


extras_require_development = [
    'basedmypy ~= 2.0, >= 2.2.1',
    'coverage ~= 7.2, >= 7.2.4',
    'flake8 ~= 6.0, >= 6.0.0',
    'pytest >= 7.3.1',
    'pytest-asyncio >= 0.21.0',
    'pytest-cov >= 4.0.0',
    'pytest-mock ~= 3.10, >= 3.10.0',
    'types-aiofiles >= 23.2.0.0',
    'types-pyyaml ~= 6.0, >= 6.0.6',
    'types-setuptools >= 68.2.0.0',
    *extras_require_setuptools,
]


SETUP = {
    'name': 'appfs',
    'description': 'appfs locates your application\'s executable and per-user data directories, and reads and writes files relative to them',
    'long_description': long_description,
    'long_description_content_type': 'text/markdown',
    'version': VERSION,
    'license': 'GPLv3',
    'classifiers': [
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Operating System :: MacOS :: MacOS X',
        'Operating System :: POSIX :: Linux',
        'Operating System :: Microsoft :: Windows',
        'Topic :: System :: Filesystems',
        'Typing :: Typed ',
    ],
    'python_requires': '>= 3.11',
    'install_requires': [
        'aiofiles >= 23.2.1',
        'click ~= 8.2',
        'platformdirs >= 4.0.0',
        'pyyaml ~= 6.0, >= 6.0.0',
        'typing_extensions >= 4.8.0',
    ],
    'extras_require': {
        'development': extras_require_development,
        'setuptools': extras_require_setuptools,
    },
    'entry_points': {
        'console_scripts': [
            'appfs=appfs.cli:main',
        ],
    },
    'packages': find_packages(),
    'package_data': {
        'appfs': [
            'assets/VERSION',
        ],
    },
}

if __name__ == '__main__':
    setup(**SETUP)
