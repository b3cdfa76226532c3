"""
Unit tests for rdp_common.config: environment configuration loading
"""

import pytest
import sys
import os
from dataclasses import FrozenInstanceError

# Add layer path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../../lambda/layers/rdp_common/python'))

from rdp_common.config import RdpConfig
from rdp_common.errors import BinaryStreamError, MissingConfiguration

REQUIRED_ENV = {
    'ENV_RDP_HOST': 'rdp.internal',
    'ENV_RDP_PORT': '8080',
    'ENV_CLIENT_ID': 'c1',
    'ENV_DEFAULT_OWNERSHIPDATA': 'org1',
    'ENV_DEFAULT_TENANT_ID': 't1',
    'ENV_DEFAULT_USER_ID': 'u1',
    'ENV_DEFAULT_USER_ROLES': 'admin',
}


class TestLoad:
    """Tests for RdpConfig.load"""

    def test_loads_all_required_values(self):
        config = RdpConfig.load(REQUIRED_ENV)

        assert config.rdp_host == 'rdp.internal'
        assert config.rdp_port == '8080'
        assert config.default_client_id == 'c1'
        assert config.default_ownership_data == 'org1'
        assert config.default_tenant_id == 't1'
        assert config.default_user_id == 'u1'
        assert config.default_user_roles == 'admin'
        assert config.is_debug_enabled is False
        assert config.use_container_metadata is False

    @pytest.mark.parametrize('missing_key', sorted(REQUIRED_ENV))
    def test_missing_value_raises(self, missing_key):
        environ = {k: v for k, v in REQUIRED_ENV.items() if k != missing_key}

        with pytest.raises(MissingConfiguration) as exc_info:
            RdpConfig.load(environ)

        assert exc_info.value.key == missing_key
        assert str(exc_info.value) == f"Unable to locate environment variable {missing_key}"

    def test_empty_value_counts_as_missing(self):
        environ = {**REQUIRED_ENV, 'ENV_DEFAULT_USER_ROLES': ''}

        with pytest.raises(MissingConfiguration) as exc_info:
            RdpConfig.load(environ)

        assert exc_info.value.key == 'ENV_DEFAULT_USER_ROLES'

    def test_reports_first_missing_in_order(self):
        with pytest.raises(MissingConfiguration) as exc_info:
            RdpConfig.load({})

        assert exc_info.value.key == 'ENV_RDP_HOST'

    def test_missing_configuration_is_binary_stream_error(self):
        with pytest.raises(BinaryStreamError):
            RdpConfig.load({})

    @pytest.mark.parametrize('value,expected', [
        ('true', True),
        ('TRUE', True),
        (' True ', True),
        ('false', False),
        ('1', False),
        ('', False),
    ])
    def test_debug_flag(self, value, expected):
        config = RdpConfig.load({**REQUIRED_ENV, 'ENV_IS_DEBUG_ENABLED': value})
        assert config.is_debug_enabled is expected

    def test_container_metadata_flag(self):
        config = RdpConfig.load({**REQUIRED_ENV, 'ENV_USE_CONTAINER_METADATA': 'true'})
        assert config.use_container_metadata is True

    def test_reads_process_environment_by_default(self, monkeypatch):
        for key, value in REQUIRED_ENV.items():
            monkeypatch.setenv(key, value)
        monkeypatch.setenv('ENV_RDP_HOST', 'from-env')

        assert RdpConfig.load().rdp_host == 'from-env'

    def test_is_immutable(self):
        config = RdpConfig.load(REQUIRED_ENV)

        with pytest.raises(FrozenInstanceError):
            config.rdp_host = 'other'


class TestToLogDict:
    """Tests for RdpConfig.to_log_dict"""

    def test_contains_all_settings(self):
        result = RdpConfig.load(REQUIRED_ENV).to_log_dict()

        assert result['rdpHost'] == 'rdp.internal'
        assert result['defaultTenantId'] == 't1'
        assert result['isDebugEnabled'] is False


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
