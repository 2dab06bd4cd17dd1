from datetime import date, datetime
from uuid import uuid4

import pytest

from mall_access.app.use_cases.audit import (
    AggregateByDayUseCase,
    AggregateByModuleUseCase,
    GetActivityUseCase,
    ListActivityUseCase,
    ListActorOptionsUseCase,
    RecentActivityUseCase,
)
from mall_access.domain.entities import SYSTEM_ACTOR, ActivityLog


def _entry(actor_id, **overrides):
    fields = {
        "id": uuid4(),
        "actor_id": str(actor_id),
        "action": "update",
        "module": "users",
        "resource_name": "Viewer",
        "created_at": datetime(2026, 3, 1, 12, 0, 0),
    }
    fields.update(overrides)
    return ActivityLog(**fields)


@pytest.mark.asyncio
async def test_list_activity_joins_actors(mock_uow, grant, make_user):
    """Known users get actor info; system and deleted users get none"""
    # Arrange
    grant(("activity_logs", "view"))
    user = make_user()
    entries = [_entry(user.id), _entry(SYSTEM_ACTOR), _entry(uuid4())]
    mock_uow.activity_logs.list_paginated.return_value = (entries, 3)
    mock_uow.users.get_by_ids.return_value = [user]

    # Act
    result = await ListActivityUseCase(mock_uow).execute(uuid4())

    # Assert
    assert result.is_ok()
    items = result.value.items
    assert items[0].actor.full_name == "Jane Doe"
    assert items[1].actor is None
    assert items[1].actor_id == "system"
    assert items[2].actor is None
    assert len(mock_uow.users.get_by_ids.call_args.args[0]) == 2


@pytest.mark.asyncio
async def test_list_activity_filters_and_paging(mock_uow, grant):
    # Arrange
    grant(("activity_logs", "view"))
    mock_uow.activity_logs.list_paginated.return_value = ([], 41)

    # Act
    result = await ListActivityUseCase(mock_uow).execute(
        uuid4(),
        search="  banner ",
        action="all",
        module="events",
        page=2,
        per_page=20,
    )

    # Assert
    assert result.is_ok()
    assert result.value.total_pages == 3
    query = mock_uow.activity_logs.list_paginated.call_args.args[0]
    assert query.search == "banner"
    assert query.action is None
    assert query.module == "events"
    assert query.offset == 20
    assert query.limit == 20


@pytest.mark.asyncio
async def test_list_activity_empty_has_zero_pages(mock_uow, grant):
    grant(("activity_logs", "view"))

    result = await ListActivityUseCase(mock_uow).execute(uuid4())

    assert result.is_ok()
    assert result.value.total == 0
    assert result.value.total_pages == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("page, per_page", [(0, 20), (1, 0), (1, 101)])
async def test_list_activity_rejects_bad_paging(mock_uow, grant, page, per_page):
    grant(("activity_logs", "view"))

    result = await ListActivityUseCase(mock_uow).execute(
        uuid4(), page=page, per_page=per_page
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_list_activity_forbidden(mock_uow, grant):
    grant(("dashboard", "view"))

    result = await ListActivityUseCase(mock_uow).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.activity_logs.list_paginated.assert_not_called()


@pytest.mark.asyncio
async def test_get_activity_not_found(mock_uow, grant):
    grant(("activity_logs", "view"))

    result = await GetActivityUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "ACTIVITY_NOT_FOUND"


@pytest.mark.asyncio
async def test_aggregate_by_module_sorted_by_count(mock_uow, grant):
    grant(("activity_logs", "view"))
    mock_uow.activity_logs.count_by_module.return_value = [
        ("auth", 3),
        ("users", 7),
        ("events", 3),
    ]

    result = await AggregateByModuleUseCase(mock_uow).execute(uuid4())

    assert result.is_ok()
    assert [(m.module, m.count) for m in result.value] == [
        ("users", 7),
        ("auth", 3),
        ("events", 3),
    ]


@pytest.mark.asyncio
async def test_aggregate_by_day_zero_fills(mock_uow, grant):
    # Arrange
    grant(("activity_logs", "view"))
    now = datetime(2026, 3, 10, 15, 30)
    mock_uow.activity_logs.count_by_day_since.return_value = [
        (date(2026, 3, 7), 2),
        (date(2026, 3, 10), 1),
    ]

    # Act
    result = await AggregateByDayUseCase(mock_uow).execute(uuid4(), last_n_days=3, now=now)

    # Assert
    assert result.is_ok()
    assert [(d.date, d.count) for d in result.value] == [
        ("2026-03-07", 2),
        ("2026-03-08", 0),
        ("2026-03-09", 0),
        ("2026-03-10", 1),
    ]
    mock_uow.activity_logs.count_by_day_since.assert_called_once_with(
        datetime(2026, 3, 7, 0, 0)
    )


@pytest.mark.asyncio
async def test_recent_activity(mock_uow, grant):
    grant(("activity_logs", "view"))
    mock_uow.activity_logs.list_recent.return_value = [_entry(SYSTEM_ACTOR)]

    result = await RecentActivityUseCase(mock_uow).execute(uuid4(), limit=5)

    assert result.is_ok()
    assert len(result.value) == 1
    mock_uow.activity_logs.list_recent.assert_called_once_with(5)
    mock_uow.users.get_by_ids.assert_not_called()


@pytest.mark.asyncio
async def test_list_actor_options(mock_uow, grant, make_user):
    grant(("activity_logs", "view"))
    mock_uow.users.list_all_by_name.return_value = [make_user()]

    result = await ListActorOptionsUseCase(mock_uow).execute(uuid4())

    assert result.is_ok()
    assert result.value[0].email == "jane@mall.example.com"
