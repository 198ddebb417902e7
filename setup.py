import os
from setuptools import setup
from re import match, S

HERE = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(HERE, 'mw_packer', '__init__.py'), 'r') as f:
    contents = f.read()
    longdesc = match('^"""(.*?)"""', contents, S).group(1)
    version = match(r'[\s\S]*__version__[^\'"]+[\'"]([^\'"]+)[\'"]', contents).group(1)
    del contents

setup(
    name="mw-packer",
    version=version,
    description="A stateful MediaWiki client for publishing articles.",
    long_description=longdesc,
    long_description_content_type='text/x-rst',
    license="MIT",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content :: Wiki',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='mediawiki api requests',
    packages=["mw_packer", "mw_packer.tests"],
    install_requires=['requests'],
    python_requires='>=3.7',
    extras_require={
        'test': ['pytest', 'urllib3'],
    },
)
