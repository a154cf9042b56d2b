# nosec B101


import json

import pytest

import cli.main
from application.services import ServiceFactory
from config.settings import Settings


@pytest.fixture
def settings():
    return Settings(_env_file=None, REFERENCE_CURRENCY='USD', SITE_TIMEOUT_SECONDS=5)


@pytest.fixture
def factory(settings, marketplace_client):
    return ServiceFactory(settings, client=marketplace_client)


@pytest.mark.asyncio
async def test_run_prints_conversion_table(settings, factory, mock_http_client, capsys):
    exit_code = await cli.main.run(settings, factory)

    captured = capsys.readouterr()
    assert exit_code == 0
    assert json.loads(captured.out) == {'ARS': 0.0025, 'BRL': 0.20}
    assert captured.out.count('\n') == 1
    mock_http_client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_run_site_list_failure_prints_error_only(settings, factory, routes, make_response, mock_http_client, capsys):
    routes['/sites'] = make_response({'message': 'boom'}, status_code=500)

    exit_code = await cli.main.run(settings, factory)

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ''
    assert captured.err.startswith('Error when trying to get currencies:')
    assert len(captured.err.strip().splitlines()) == 1
    mock_http_client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_run_failing_site_is_left_out(settings, factory, routes, make_response, capsys):
    routes['/sites/MLB'] = make_response({'message': 'boom'}, status_code=500)

    exit_code = await cli.main.run(settings, factory)

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {'ARS': 0.0025}


@pytest.mark.asyncio
async def test_run_sequential_variant_gives_same_table(marketplace_client, capsys):
    settings = Settings(_env_file=None, MAX_CONCURRENCY=1)
    factory = ServiceFactory(settings, client=marketplace_client)

    exit_code = await cli.main.run(settings, factory)

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {'ARS': 0.0025, 'BRL': 0.20}


def test_main_exits_with_run_status(monkeypatch, settings, factory, routes, make_response, capsys, restore_root_logger):
    routes['/sites'] = make_response({'message': 'boom'}, status_code=500)
    monkeypatch.setattr(cli.main, 'get_settings', lambda: settings)
    monkeypatch.setattr(cli.main, 'ServiceFactory', lambda s: factory)

    with pytest.raises(SystemExit) as exc_info:
        cli.main.main()

    assert exc_info.value.code == 1
    assert capsys.readouterr().out == ''
