import copy
import gc
import logging
import pickle

import pytest

from utils.secret_string import REDACTED, SecretString, reveal, wrap


@pytest.mark.parametrize("token", [
    "test_token",
    "a",
    "**********",
    "SecretString",
    "None",
    "<hidden>",
    "tökén-ü",
])
def test_default_representations_hide_token(token):
    secret = wrap(token)
    for text in (repr(secret), str(secret), f"{secret}", "%s" % secret, f"{secret!r}", f"{secret:>40}"):
        assert text.strip() == f"SecretString('{REDACTED}')"


def test_repr_identical_for_different_tokens():
    assert repr(wrap("one")) == repr(wrap("two"))


def test_reveal_returns_plaintext():
    assert reveal(wrap("test_token")) == "test_token"
    assert wrap("test_token").expose_secret() == "test_token"


def test_wrap_accepts_empty_string():
    secret = wrap("")
    assert reveal(secret) == ""
    assert not secret


@pytest.mark.parametrize("token", ["tok\udcffen", "\ud800", "mixed\udc80\u00e9\U0001f600"])
def test_wrap_accepts_lone_surrogates(token):
    secret = wrap(token)
    assert reveal(secret) == token
    assert wrap(token) == secret


def test_wrap_rejects_non_string():
    with pytest.raises(TypeError):
        SecretString(b"bytes")


def test_equality_compares_values():
    assert wrap("abc") == wrap("abc")
    assert wrap("abc") != wrap("abd")
    assert wrap("abc") != "abc"


def test_scrubbed_secrets_are_never_equal():
    first = wrap("abc")
    second = wrap("xyz")
    first.zeroize()
    second.zeroize()
    assert first != second
    assert first != first
    assert wrap("abc") != first


def test_unhashable():
    with pytest.raises(TypeError):
        hash(wrap("abc"))


def test_copies_share_the_secret():
    secret = wrap("abc")
    assert copy.copy(secret) is secret
    assert copy.deepcopy(secret) is secret
    assert copy.deepcopy({"token": secret})["token"] is secret


def test_pickling_is_refused():
    with pytest.raises(TypeError):
        pickle.dumps(wrap("abc"))


def test_zeroize_scrubs_buffer():
    secret = wrap("abc")
    buffer = secret._buffer
    secret.zeroize()
    assert bytes(buffer) == b"\x00\x00\x00"
    assert secret.is_zeroized
    assert not secret
    with pytest.raises(ValueError):
        secret.expose_secret()


def test_zeroize_is_idempotent():
    secret = wrap("abc")
    secret.zeroize()
    secret.zeroize()
    assert len(secret) == 3


def test_drop_scrubs_buffer():
    secret = wrap("abc")
    buffer = secret._buffer
    del secret
    gc.collect()
    assert bytes(buffer) == b"\x00\x00\x00"


def test_len_does_not_reveal():
    assert len(wrap("abcd")) == 4


def test_logging_the_handle_hides_token(caplog):
    with caplog.at_level(logging.INFO):
        logging.getLogger("test").info("token=%s", wrap("super_secret"))
    assert "super_secret" not in caplog.text
    assert REDACTED in caplog.text
