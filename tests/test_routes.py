"""
Unit tests for reaction route descriptors.
"""

from urllib.parse import quote

import pytest

from discord_reactions import ReactionEmoji, routes


@pytest.fixture
def api_base():
    """Restore the API base and version after a test changes them."""
    yield
    routes._set_api_base('https://discord.com/api')
    routes._set_api_version(10)


class TestReactionRoutes:

    def test_add_reaction_guild_emoji(self):
        r = routes.add_reaction(1, 2, ReactionEmoji.from_guild_emoji('pepe', 123))

        assert r.method == 'PUT'
        assert r.url == f"https://discord.com/api/v10/channels/1/messages/2/reactions/{quote('pepe:123')}/@me"

    def test_unicode_emoji_is_quoted(self):
        r = routes.remove_own_reaction(1, 2, ReactionEmoji.from_unicode('😀'))

        assert r.method == 'DELETE'
        assert r.url.endswith('/reactions/%F0%9F%98%80/@me')

    def test_remove_reaction(self):
        r = routes.remove_reaction(1, 2, ReactionEmoji.from_unicode('👍'), 99)

        assert r.url.endswith(f"/reactions/{quote('👍')}/99")

    def test_get_reaction_users_and_clear(self):
        emoji = ReactionEmoji.from_guild_emoji('pepe', 5)

        assert routes.get_reaction_users(1, 2, emoji).method == 'GET'
        assert routes.clear_single_reaction(1, 2, emoji).method == 'DELETE'
        assert routes.get_reaction_users(1, 2, emoji).url == routes.clear_single_reaction(1, 2, emoji).url

    def test_mention_string_is_stripped(self):
        r = routes.add_reaction(1, 2, '<:pepe:123>')

        assert quote(':pepe:123') in r.url

    def test_wrong_emoji_type(self):
        with pytest.raises(TypeError):
            routes.add_reaction(1, 2, 123)


class TestApiConfiguration:

    def test_set_api_version(self, api_base):
        routes._set_api_version(9)

        assert routes.add_reaction(1, 2, '😀').url.startswith('https://discord.com/api/v9/')

    def test_set_api_base(self, api_base):
        routes._set_api_base('http://localhost:8080/api')

        assert routes.Route.BASE == 'http://localhost:8080/api/v10'

    def test_invalid_version(self, api_base):
        with pytest.raises(ValueError):
            routes._set_api_version(3)

        with pytest.raises(TypeError):
            routes._set_api_version('10')
