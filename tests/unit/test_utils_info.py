"""
Unit tests for the netsplit-info utility.
"""

import netsplit
from netsplit.utils.info import get_netsplit_info, get_system_info, main


class TestInfo:
    """Test package information reporting."""

    def test_netsplit_info(self):
        """Test package metadata is reported."""
        info = get_netsplit_info()

        assert info['version'] == netsplit.__version__
        assert info['collision_check'] is False

    def test_system_info_has_torch(self):
        """Test the torch version is reported."""
        info = get_system_info()

        assert info['torch_version'] != 'Not installed'
        assert info['torch_fx_available'] is True

    def test_main_prints_summary(self, capsys):
        """Test the console entry point prints a summary."""
        main()

        output = capsys.readouterr().out
        assert "netsplit Version" in output
        assert "PyTorch Version" in output
