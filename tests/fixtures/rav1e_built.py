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
PKG_AUTHORS = 'Thomas Daede <tdaede@xiph.org>'
#: The name of the package.
PKG_NAME = 'rav1e'
#: The description.
PKG_DESCRIPTION = 'The fastest and safest AV1 encoder'
#: The homepage.
PKG_HOMEPAGE = ''
#: The license.
PKG_LICENSE = 'BSD-2-Clause'
#: The source repository as advertised in pyproject.toml.
PKG_REPOSITORY = 'https://github.com/xiph/rav1e/'
#: The target triple that was being built for.
TARGET = 'x86_64-pc-windows-msvc'
#: The host triple of the build interpreter.
HOST = 'x86_64-pc-windows-msvc'
#: `release` for release builds, `debug` for other builds.
PROFILE = 'release'
#: The interpreter the build ran under.
COMPILER = 'C:\\Users\\Administrator\\.rustup\\toolchains\\stable-x86_64-pc-windows-msvc\\bin\\rustc.exe'
#: The documentation generator resolved for the build.
DOC_TOOL = 'C:\\Users\\Administrator\\.rustup\\toolchains\\stable-x86_64-pc-windows-msvc\\bin\\rustdoc.exe'
#: Optimization level for the profile used during the build.
OPT_LEVEL = '3'
#: The parallelism that was specified during the build.
NUM_JOBS = 24
#: Whether the profile used during the build is a debug profile.
DEBUG = False
#: The features that were enabled during the build.
FEATURES = ('THREADING',)
#: The features as a comma-separated string.
FEATURES_STR = 'THREADING'
#: The features as above, as lowercase strings.
FEATURES_LOWERCASE = ('threading',)
#: The feature-string as above, from lowercase strings.
FEATURES_LOWERCASE_STR = 'threading'
#: The version reported by the build interpreter.
COMPILER_VERSION = 'rustc 1.93.0 (254b59607 2026-01-19)'
#: The output of `DOC_TOOL --version`; empty string if it failed to execute.
DOC_TOOL_VERSION = 'rustdoc 1.93.0 (254b59607 2026-01-19)'
#: The target architecture.
CFG_TARGET_ARCH = 'x86_64'
#: The endianness.
CFG_ENDIAN = 'little'
#: The toolchain environment (C library or ABI).
CFG_ENV = 'msvc'
#: The OS family.
CFG_FAMILY = 'windows'
#: The operating system.
CFG_OS = 'windows'
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
