import pytest

from yewchat.app import (
    LoginForm,
    Route,
    User,
    about_text,
    main,
    route_for,
    theme_button_label,
    toggle_dark_class,
)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/", Route.LOGIN),
        ("/chat", Route.CHAT),
        ("/about", Route.ABOUT),
        ("/404", Route.NOT_FOUND),
        ("/nowhere", Route.NOT_FOUND),
        ("", Route.NOT_FOUND),
    ],
)
def test_route_for(path, expected):
    assert route_for(path) is expected


def test_route_paths_round_trip():
    for route in Route:
        assert route_for(route.value) is route


def test_dark_class_added_to_empty():
    assert toggle_dark_class("", True) == " dark"


def test_dark_class_not_added_twice():
    assert toggle_dark_class("page dark", True) == "page dark"


def test_dark_then_light_restores_classes():
    assert toggle_dark_class(toggle_dark_class("a b", True), False) == "a b"


def test_light_removes_every_dark_class():
    result = toggle_dark_class("dark a dark b", False)
    assert "dark" not in result.split()
    assert result.split() == ["a", "b"]


def test_light_keeps_similar_names():
    assert toggle_dark_class("darker", False) == "darker"


def test_theme_button_label():
    assert theme_button_label(True) == "☀️ Light"
    assert theme_button_label(False) == "🌙 Dark"


def test_user_default_name():
    assert User().username == "initial"


def test_login_form_disabled_when_empty():
    form = LoginForm()
    assert form.can_submit() is False
    with pytest.raises(ValueError):
        form.submit(User())


def test_login_form_sets_username():
    user = User()
    form = LoginForm()
    form.set_input("carol")
    assert form.can_submit() is True
    assert form.submit(user) is Route.CHAT
    assert user.username == "carol"


def test_login_form_cleared_input_disables():
    form = LoginForm()
    form.set_input("dave")
    form.set_input("")
    assert form.can_submit() is False


def test_about_text_contents():
    text = about_text()
    assert text.startswith("Why Creativity Matters")
    assert "Creativity is one of the most critical traits" in text


def test_main_about(capsys):
    assert main(["--about"]) == 0
    assert capsys.readouterr().out.strip() == about_text()


def test_main_no_username_on_eof(monkeypatch):
    def fake_input(_prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 1