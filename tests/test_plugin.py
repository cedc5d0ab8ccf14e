from __future__ import annotations

import plugin


def test_plugin_init_loads_textdomain_and_registers_init(host, monkeypatch):
    textdomains: list[tuple] = []
    actions: list[tuple] = []
    monkeypatch.setattr(host, "load_textdomain", lambda domain, path: textdomains.append((domain, path)) or True)
    monkeypatch.setattr(host, "add_action", lambda hook, cb, priority=10: actions.append((hook, cb)) or True)

    assert plugin.init(host) is None

    assert textdomains == [("plugin-name", plugin.LANGUAGES_DIR)]
    assert actions == [("init", plugin.register_post_types)]


def test_plugin_init_hooks_are_not_fired_until_ready(host):
    plugin.init(host)

    assert host.has_action("init", plugin.register_post_types) is True
    assert host.did_action("init") == 0

    host.do_action("init")
    assert host.did_action("init") == 1


def test_register_post_types_is_a_noop():
    assert callable(plugin.register_post_types)
    assert plugin.register_post_types() is None


def test_plugin_constants_are_defined():
    assert plugin.VERSION == "1.0.0"
    assert plugin.TEXT_DOMAIN == "plugin-name"
    assert plugin.PLUGIN_FILE.name == "plugin.py"
    assert plugin.PLUGIN_DIR == plugin.PLUGIN_FILE.parent
    assert plugin.LANGUAGES_DIR == plugin.PLUGIN_DIR / "languages"
    assert plugin.LANGUAGES_DIR.is_dir()


def test_each_host_gets_its_own_registrations(host):
    from host import Host
    from persistence import InMemoryOptionsBackend

    other = Host(InMemoryOptionsBackend())
    plugin.init(host)

    assert host.has_action("init") is True
    assert other.has_action("init") is False


def test_plugin_init_twice_registers_callback_once(host):
    plugin.init(host)
    plugin.init(host)
    host.add_action("init", lambda: None)

    registered = [cb for _, _, cb in host._actions["init"]]
    assert len(registered) == 2
    assert registered.count(plugin.register_post_types) == 1
