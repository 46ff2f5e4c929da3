# -*- Python -*-

import os
import platform
import shutil
import sys

import lit.formats

# Configuration file for the 'lit' test runner.

# name: The name of this test suite.
config.name = 'soltree'

# testFormat: The test format to use to interpret tests.
config.test_format = lit.formats.ShTest(True)

# suffixes: A list of file extensions to treat as test files.
config.suffixes = ['.test']

# Unit tests are run by pytest, not lit.
config.excludes = ['unit', 'Inputs']

# test_source_root: The root path where tests are located.
config.test_source_root = os.path.dirname(__file__)

# test_exec_root: The root path where tests should be run.
config.test_exec_root = os.path.join(config.test_source_root, 'Output')

# Find soltree
if hasattr(config, 'soltree') and config.soltree:
    soltree_path = config.soltree
else:
    soltree_path = shutil.which('soltree')

if soltree_path:
    config.substitutions.append(('%soltree', soltree_path))
else:
    # Fall back to running the package from the current interpreter
    config.substitutions.append(('%soltree', f'{sys.executable} -m soltree'))

# Test directories
config.substitutions.append(('%S', config.test_source_root))
config.substitutions.append(('%p', config.test_source_root))
config.substitutions.append(('%{inputs}', os.path.join(config.test_source_root, 'Inputs')))

# Project root directory (parent of test directory)
project_root = os.path.dirname(config.test_source_root)
config.substitutions.append(('%{project_root}', project_root))

# Platform-specific features
if platform.system() == 'Darwin':
    config.available_features.add('darwin')
elif platform.system() == 'Linux':
    config.available_features.add('linux')

# Add 'not' command
not_path = shutil.which('not')
if not not_path:
    # Try common locations
    for path in ['/usr/local/opt/llvm/bin', '/opt/homebrew/opt/llvm/bin', '/usr/bin']:
        candidate = os.path.join(path, 'not')
        if os.path.exists(candidate):
            not_path = candidate
            break
if not_path:
    config.substitutions.append(('not', not_path))

# Find and add FileCheck
filecheck_path = None
for path in ['/usr/local/opt/llvm/bin', '/opt/homebrew/opt/llvm/bin', '/usr/bin']:
    candidate = os.path.join(path, 'FileCheck')
    if os.path.exists(candidate):
        filecheck_path = candidate
        break

if not filecheck_path:
    filecheck_path = shutil.which('FileCheck')

# If FileCheck is not found, tests will fail but we'll let lit report it
config.substitutions.append(('FileCheck', filecheck_path or 'FileCheck'))

# Environment variables
config.environment['PYTHONPATH'] = os.pathsep.join(
    [os.path.join(project_root, 'src')] + sys.path
)
config.environment['SOLTREE_NO_COLOR'] = '1'
