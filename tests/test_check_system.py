"""
Tests for the pre-deploy system check
"""

import os
import pytest
from unittest.mock import AsyncMock, patch

from scripts import check_system


SHIPPED_CONFIG = os.path.join(os.path.dirname(__file__), '..', 'config', 'deploy_config.json')


@pytest.fixture
def network_config():
    return {'data': {'config': {'erd_chain_id': 'D'}}, 'code': 'successful'}


class TestChecks:

    def test_signing_key_present(self, config):
        assert check_system.check_signing_key(config)

    def test_signing_key_missing(self, config, tmp_path):
        config.pem_file = str(tmp_path / 'absent.pem')
        assert not check_system.check_signing_key(config)

    def test_tool_binary_missing(self, config):
        config.tool_binary = 'erdpy-not-installed-anywhere'
        assert not check_system.check_tool_binary(config)

    def test_missing_artifact_is_a_warning(self, config, tmp_path):
        config.bytecode_path = str(tmp_path / 'absent.wasm')
        assert check_system.check_contract_artifact(config)

    def test_configuration_file_missing(self, tmp_path):
        assert check_system.check_configuration_file(str(tmp_path / 'nope.json')) is None

    def test_configuration_file_returns_config(self):
        config = check_system.check_configuration_file(SHIPPED_CONFIG)

        assert config.network == 'devnet'
        assert config.chain_id == 'D'


class TestProxyCheck:

    def test_matching_chain(self, config, network_config):
        with patch.object(check_system, '_fetch_network_config', AsyncMock(return_value=network_config)):
            assert check_system.check_proxy_connection(config)

    def test_chain_mismatch(self, config, network_config):
        network_config['data']['config']['erd_chain_id'] = '1'

        with patch.object(check_system, '_fetch_network_config', AsyncMock(return_value=network_config)):
            assert not check_system.check_proxy_connection(config)

    def test_unreachable(self, config):
        error = check_system.aiohttp.ClientConnectionError('refused')

        with patch.object(check_system, '_fetch_network_config', AsyncMock(side_effect=error)):
            assert not check_system.check_proxy_connection(config)


def test_main_fails_without_config(tmp_path):
    assert check_system.main(str(tmp_path / 'nope.json')) == 1


def test_main_loads_config_once(monkeypatch):
    loaded = []
    original = check_system.DeploymentConfig.from_file

    def counting_from_file(path, network=None):
        loaded.append(path)
        return original(path, network=network)

    monkeypatch.setattr(check_system.DeploymentConfig, 'from_file', counting_from_file)
    monkeypatch.setattr(check_system, 'check_proxy_connection', lambda config: True)

    check_system.main(SHIPPED_CONFIG)

    assert loaded == [SHIPPED_CONFIG]


class TestReportResults:

    def test_all_passed(self):
        assert check_system.report_results([('Signing Key', True), ('Contract Tool', True)]) == 0

    def test_any_failed(self):
        assert check_system.report_results([('Signing Key', True), ('Contract Tool', False)]) == 1
