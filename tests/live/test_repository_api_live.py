"""
Live tests for RepositoryApi against a real Bitbucket Server.

Run with BITBUCKET_REST_ENDPOINT and BITBUCKET_REST_CREDENTIALS set to an
admin account. Tests run in declaration order: the repository is created
first and deleted last, inside a throwaway project.
"""

import os
import random
import string

import pytest

from bitbucket_rest.application.bitbucket_api import BitbucketApi
from bitbucket_rest.domain.options import CreateProject, CreatePullRequestSettings, CreateRepository
from bitbucket_rest.domain.pull_request_settings import (
    MergeConfig,
    MergeConfigType,
    MergeStrategy,
    MergeStrategyId,
)

pytestmark = [
    pytest.mark.live,
    pytest.mark.skipif(not os.getenv("BITBUCKET_REST_ENDPOINT"), reason="BITBUCKET_REST_ENDPOINT not set"),
]

EXISTING_USER = os.getenv("BITBUCKET_REST_EXISTING_USER", "admin")
EXISTING_GROUP = os.getenv("BITBUCKET_REST_EXISTING_GROUP", "stash-users")


def random_string_letters_only(length=10):
    return "".join(random.choice(string.ascii_letters) for _ in range(length))


def random_string(length=10):
    return "".join(random.choice(string.ascii_letters + string.digits) for _ in range(length))


def random_hook_key():
    return f"{random_string_letters_only()}:{random_string_letters_only()}"


@pytest.fixture(scope="module")
def bitbucket():
    api = BitbucketApi()
    yield api
    api.close()


@pytest.fixture(scope="module")
def state():
    return {"hook_key": None}


@pytest.fixture(scope="module")
def project_key(bitbucket):
    key = random_string_letters_only()
    project = bitbucket.project_api().create(CreateProject.create(key, None, None, None))
    assert project.errors == []
    assert project.key.lower() == key.lower()

    yield key

    assert bitbucket.project_api().delete(key) is True


@pytest.fixture(scope="module")
def repo_key():
    return random_string_letters_only()


@pytest.fixture
def repos(bitbucket):
    return bitbucket.repository_api()


def test_create_repository(repos, project_key, repo_key):
    repository = repos.create(project_key, CreateRepository.create(repo_key, True))

    assert repository.errors == []
    assert repository.name.lower() == repo_key.lower()


def test_get_repository(repos, project_key, repo_key):
    repository = repos.get(project_key, repo_key)

    assert repository.errors == []
    assert repository.name.lower() == repo_key.lower()


def test_list_repositories(repos, project_key, repo_key):
    page = repos.list(project_key, 0, 100)

    assert page.errors == []
    assert page.size > 0
    matching = [r for r in page.values if r.slug.lower() == repo_key.lower()]
    assert len(matching) == 1


def test_delete_repository_non_existent(repos, project_key):
    assert repos.delete(project_key, random_string_letters_only()) is True


def test_get_repository_non_existent(repos, project_key):
    repository = repos.get(project_key, random_string_letters_only())

    assert repository.errors


def test_create_repository_with_illegal_name(repos, project_key):
    repository = repos.create(project_key, CreateRepository.create("!-_999-9*", True))

    assert repository.errors


def test_get_pull_request_settings(repos, project_key, repo_key):
    settings = repos.get_pull_request_settings(project_key, repo_key)

    assert settings.errors == []
    assert settings.merge_config.strategies


def test_update_pull_request_settings(repos, project_key, repo_key):
    strategy = MergeStrategy.create(None, None, None, MergeStrategyId.SQUASH, None)
    merge_config = MergeConfig.create(strategy, [strategy], MergeConfigType.REPOSITORY)
    request = CreatePullRequestSettings.create(merge_config, False, False, 0, 1)

    settings = repos.update_pull_request_settings(project_key, repo_key, request)

    assert settings.errors == []
    assert settings.merge_config.strategies
    assert settings.merge_config.default_strategy.id is MergeStrategyId.SQUASH


def test_list_permissions_by_user(repos, project_key, repo_key):
    assert repos.list_permissions_by_user(project_key, repo_key, 0, 100).values == []


def test_list_permissions_by_group(repos, project_key, repo_key):
    assert repos.list_permissions_by_group(project_key, repo_key, 0, 100).values == []


def test_create_permission_by_group_non_existent(repos, project_key, repo_key):
    assert repos.create_permissions_by_group(project_key, repo_key, "REPO_WRITE", random_string()) is False


def test_delete_permission_by_group_non_existent(repos, project_key, repo_key):
    assert repos.delete_permissions_by_group(project_key, repo_key, random_string()) is True


def test_create_permission_by_group(repos, project_key, repo_key):
    assert repos.create_permissions_by_group(project_key, repo_key, "REPO_WRITE", EXISTING_GROUP) is True


def test_delete_permission_by_group(repos, project_key, repo_key):
    assert repos.delete_permissions_by_group(project_key, repo_key, EXISTING_GROUP) is True


def test_create_permission_by_user(repos, project_key, repo_key):
    assert repos.create_permissions_by_user(project_key, repo_key, "REPO_WRITE", EXISTING_USER) is True


def test_delete_permission_by_user(repos, project_key, repo_key):
    assert repos.delete_permissions_by_user(project_key, repo_key, EXISTING_USER) is True


def test_create_permission_by_user_non_existent(repos, project_key, repo_key):
    assert repos.create_permissions_by_user(project_key, repo_key, "REPO_WRITE", random_string()) is False


def test_delete_permission_by_user_non_existent(repos, project_key, repo_key):
    assert repos.delete_permissions_by_user(project_key, repo_key, random_string()) is False


def test_list_hooks(repos, project_key, repo_key, state):
    page = repos.list_hooks(project_key, repo_key, 0, 100)

    assert page.errors == []
    assert page.size > 0
    for hook in page.values:
        if hook.details.config_form_key is None:
            assert hook.details.key is not None
            state["hook_key"] = hook.details.key
            break


def test_list_hooks_on_error(repos, project_key):
    page = repos.list_hooks(project_key, random_string(), 0, 100)

    assert page.errors
    assert page.values == []


def test_get_hook(repos, project_key, repo_key, state):
    if state["hook_key"] is None:
        pytest.skip("server has no hook without a settings form")

    hook = repos.get_hook(project_key, repo_key, state["hook_key"])

    assert hook.errors == []
    assert hook.details.key == state["hook_key"]
    assert hook.enabled is False


def test_get_hook_on_error(repos, project_key, repo_key):
    hook = repos.get_hook(project_key, repo_key, random_hook_key())

    assert hook.errors
    assert hook.enabled is False


def test_enable_hook(repos, project_key, repo_key, state):
    if state["hook_key"] is None:
        pytest.skip("server has no hook without a settings form")

    hook = repos.enable_hook(project_key, repo_key, state["hook_key"])

    assert hook.errors == []
    assert hook.details.key == state["hook_key"]
    assert hook.enabled is True


def test_enable_hook_on_error(repos, project_key, repo_key):
    hook = repos.enable_hook(project_key, repo_key, random_hook_key())

    assert hook.errors
    assert hook.enabled is False


def test_disable_hook(repos, project_key, repo_key, state):
    if state["hook_key"] is None:
        pytest.skip("server has no hook without a settings form")

    hook = repos.disable_hook(project_key, repo_key, state["hook_key"])

    assert hook.errors == []
    assert hook.details.key == state["hook_key"]
    assert hook.enabled is False


def test_disable_hook_on_error(repos, project_key, repo_key):
    hook = repos.disable_hook(project_key, repo_key, random_hook_key())

    assert hook.errors
    assert hook.enabled is False


def test_iter_repositories(bitbucket, project_key, repo_key):
    slugs = [r.slug.lower() for r in bitbucket.iter_repositories(project_key)]

    assert repo_key.lower() in slugs


def test_delete_repository(repos, project_key, repo_key):
    assert repos.delete(project_key, repo_key) is True
