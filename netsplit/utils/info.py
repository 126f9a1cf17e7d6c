"""
Package information utility.

This module provides a command-line utility for displaying
information about the netsplit installation and environment.
"""

import sys
import platform
from typing import Dict, Any
import netsplit


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to netsplit.

    Returns:
        Dictionary containing system information
    """
    info = {
        'python_version': sys.version,
        'platform': platform.platform(),
        'architecture': platform.architecture(),
    }

    try:
        import torch
        info['torch_version'] = torch.__version__
        info['torch_fx_available'] = hasattr(torch, 'fx')
    except ImportError:
        info['torch_version'] = 'Not installed'
        info['torch_fx_available'] = False

    return info


def get_netsplit_info() -> Dict[str, Any]:
    """
    Get netsplit-specific information.

    Returns:
        Dictionary containing netsplit information
    """
    from netsplit.utils.config import YAML_AVAILABLE, get_config

    config = get_config()
    return {
        'version': netsplit.__version__,
        'author': netsplit.__author__,
        'config_file': str(config.config_file),
        'collision_check': config.is_collision_check_enabled(),
        'yaml_config_supported': YAML_AVAILABLE,
    }


def print_info() -> None:
    """Print formatted information about netsplit and the system."""
    print("netsplit: split layer insertion for network definitions")
    print("=" * 40)

    netsplit_info = get_netsplit_info()
    print(f"\nnetsplit Version: {netsplit_info['version']}")
    print(f"Author: {netsplit_info['author']}")
    print(f"Config File: {netsplit_info['config_file']}")
    print(f"Name Collision Check: {netsplit_info['collision_check']}")
    print(f"YAML Config Supported: {netsplit_info['yaml_config_supported']}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"Architecture: {system_info['architecture'][0]}")

    if system_info['torch_version'] != 'Not installed':
        print(f"PyTorch Version: {system_info['torch_version']}")
        print(f"torch.fx Available: {system_info['torch_fx_available']}")
    else:
        print("PyTorch: Not installed")


def main() -> None:
    """Main entry point for the netsplit-info command."""
    try:
        print_info()
    except Exception as e:
        print(f"Error getting system information: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
