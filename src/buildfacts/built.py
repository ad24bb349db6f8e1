"""Build facts recorded for this package.

Generated by ``buildfacts generate``. Regenerate instead of editing.
"""
#
# EVERYTHING BELOW THIS POINT WAS AUTO-GENERATED DURING THE BUILD. DO NOT MODIFY.
#

#: The continuous integration platform detected during the build.
CI_PLATFORM = None
#: The full version.
PKG_VERSION = '0.8.1'
#: The major version.
PKG_VERSION_MAJOR = '0'
#: The minor version.
PKG_VERSION_MINOR = '8'
#: The patch version.
PKG_VERSION_PATCH = '1'
#: The pre-release version.
PKG_VERSION_PRE = ''
#: A colon-separated list of authors.
PKG_AUTHORS = 'Buildfacts Maintainers <maintainers@buildfacts.dev>'
#: The name of the package.
PKG_NAME = 'buildfacts'
#: The description.
PKG_DESCRIPTION = 'Build provenance facts captured at build time and exposed at runtime'
#: The homepage.
PKG_HOMEPAGE = ''
#: The license.
PKG_LICENSE = 'MIT'
#: The source repository as advertised in pyproject.toml.
PKG_REPOSITORY = ''
#: The target triple that was being built for.
TARGET = 'x86_64-pc-linux-gnu'
#: The host triple of the build interpreter.
HOST = 'x86_64-pc-linux-gnu'
#: `release` for release builds, `debug` for other builds.
PROFILE = 'release'
#: The interpreter the build ran under.
COMPILER = '/usr/bin/python3'
#: The documentation generator resolved for the build.
DOC_TOOL = 'sphinx-build'
#: Optimization level for the profile used during the build.
OPT_LEVEL = '0'
#: The parallelism that was specified during the build.
NUM_JOBS = 8
#: Whether the profile used during the build is a debug profile.
DEBUG = False
#: The features that were enabled during the build.
FEATURES = ('RICH', 'YAML')
#: The features as a comma-separated string.
FEATURES_STR = 'RICH,YAML'
#: The features as above, as lowercase strings.
FEATURES_LOWERCASE = ('rich', 'yaml')
#: The feature-string as above, from lowercase strings.
FEATURES_LOWERCASE_STR = 'rich,yaml'
#: The version reported by the build interpreter.
COMPILER_VERSION = 'CPython 3.12.3'
#: The output of `DOC_TOOL --version`; empty string if it failed to execute.
DOC_TOOL_VERSION = ''
#: The target architecture.
CFG_TARGET_ARCH = 'x86_64'
#: The endianness.
CFG_ENDIAN = 'little'
#: The toolchain environment (C library or ABI).
CFG_ENV = 'gnu'
#: The OS family.
CFG_FAMILY = 'unix'
#: The operating system.
CFG_OS = 'linux'
#: The pointer width.
CFG_POINTER_WIDTH = '64'
#: The override variables that were used during the build.
OVERRIDE_VARIABLES_USED = ()
#: The override variables as a comma-separated string.
OVERRIDE_VARIABLES_USED_STR = ''
#: The full commit hash of the working tree, if known.
GIT_COMMIT_HASH = None
#: The abbreviated commit hash, if known.
GIT_COMMIT_HASH_SHORT = None
#: Whether the working tree had uncommitted changes, if known.
GIT_DIRTY = None

#
# EVERYTHING ABOVE THIS POINT WAS AUTO-GENERATED DURING THE BUILD. DO NOT MODIFY.
#
