# site_walker/__init__.py
"""
SiteWalker package initializer.
Defines the package version; the command-line entry point is site_walker.cli:cli.
"""
__version__ = "0.1.0"
