from launchkit.parsing.hints import contextual_placeholder, extract_app_url


def test_extract_app_url_default_domain() -> None:
    text = "🚀 Your app is live at https://app-0a1b2c3d.launchkit.stratxi.com - enjoy!"
    assert extract_app_url(text) == "https://app-0a1b2c3d.launchkit.stratxi.com"


def test_extract_app_url_custom_domain() -> None:
    text = "Visit https://app-abc12345.example.com/dashboard"
    assert extract_app_url(text, "example.com") == "https://app-abc12345.example.com"
    assert extract_app_url(text) is None


def test_extract_app_url_rejects_non_hex_ids() -> None:
    assert extract_app_url("https://app-ABC12345.launchkit.stratxi.com") is None
    assert extract_app_url("https://app-xyz12345.launchkit.stratxi.com") is None
    assert extract_app_url("no links") is None


def test_extract_app_url_escapes_domain_dots() -> None:
    assert extract_app_url("https://app-abc12345.exampleXcom", "example.com") is None


def test_contextual_placeholder() -> None:
    assert contextual_placeholder(0, False, False) == "Describe the app you'd like to build..."
    assert contextual_placeholder(0, True, True) == "Describe the app you'd like to build..."
    assert contextual_placeholder(3, False, True) == "Make any changes or ask me to deploy it!"
    assert contextual_placeholder(3, True, True) == "What would you like to update or add?"
    assert contextual_placeholder(3, True, False) == "What would you like to update or add?"
    assert contextual_placeholder(3, False, False) == "Continue describing your app or ask me to build it..."
