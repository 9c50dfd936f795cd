"""Row-level access rules, expressed as SQL predicates.

Every endpoint reads and writes through `readable()` / `writable()` so the
requesting user's identity shapes the query itself. A row the caller may not
see simply does not come back, which is indistinguishable from a row that
does not exist.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable

from sqlalchemy import ColumnElement, Select, false, select, true

from fitquest.models import (
    Achievement,
    BodyMeasurement,
    CoachGroup,
    Exercise,
    GroupMember,
    PersonalBest,
    Profile,
    TemplateExercise,
    UserAchievement,
    UserFollow,
    Workout,
    WorkoutExercise,
    WorkoutLike,
    WorkoutShare,
    WorkoutTemplate,
)

Predicate = Callable[[uuid.UUID], ColumnElement[bool]]


def _owns_workout(user_id: uuid.UUID) -> ColumnElement[bool]:
    return (
        select(Workout.id)
        .where(Workout.id == WorkoutExercise.workout_id, Workout.user_id == user_id)
        .exists()
    )


def _template_readable(user_id: uuid.UUID) -> ColumnElement[bool]:
    return (
        select(WorkoutTemplate.id)
        .where(
            WorkoutTemplate.id == TemplateExercise.template_id,
            WorkoutTemplate.is_public.is_(True) | (WorkoutTemplate.creator_id == user_id),
        )
        .exists()
    )


def _template_owned(user_id: uuid.UUID) -> ColumnElement[bool]:
    return (
        select(WorkoutTemplate.id)
        .where(WorkoutTemplate.id == TemplateExercise.template_id, WorkoutTemplate.creator_id == user_id)
        .exists()
    )


def _group_visible(user_id: uuid.UUID) -> ColumnElement[bool]:
    is_member = (
        select(GroupMember.id)
        .where(GroupMember.group_id == CoachGroup.id, GroupMember.user_id == user_id)
        .exists()
    )
    return (CoachGroup.coach_id == user_id) | is_member


def _coaches_group(user_id: uuid.UUID) -> ColumnElement[bool]:
    return (
        select(CoachGroup.id)
        .where(CoachGroup.id == GroupMember.group_id, CoachGroup.coach_id == user_id)
        .exists()
    )


READ_RULES: dict[type, Predicate] = {
    Profile: lambda uid: true(),
    Exercise: lambda uid: true(),
    Achievement: lambda uid: true(),
    Workout: lambda uid: Workout.user_id == uid,
    WorkoutExercise: _owns_workout,
    PersonalBest: lambda uid: true(),
    UserAchievement: lambda uid: UserAchievement.user_id == uid,
    BodyMeasurement: lambda uid: BodyMeasurement.user_id == uid,
    WorkoutTemplate: lambda uid: WorkoutTemplate.is_public.is_(True) | (WorkoutTemplate.creator_id == uid),
    TemplateExercise: _template_readable,
    UserFollow: lambda uid: true(),
    WorkoutShare: lambda uid: true(),
    WorkoutLike: lambda uid: true(),
    CoachGroup: _group_visible,
    GroupMember: lambda uid: _coaches_group(uid) | (GroupMember.user_id == uid),
}

WRITE_RULES: dict[type, Predicate] = {
    Profile: lambda uid: Profile.user_id == uid,
    # Reference data: nobody writes through the API
    Exercise: lambda uid: false(),
    Achievement: lambda uid: false(),
    Workout: lambda uid: Workout.user_id == uid,
    WorkoutExercise: _owns_workout,
    PersonalBest: lambda uid: PersonalBest.user_id == uid,
    UserAchievement: lambda uid: UserAchievement.user_id == uid,
    BodyMeasurement: lambda uid: BodyMeasurement.user_id == uid,
    WorkoutTemplate: lambda uid: WorkoutTemplate.creator_id == uid,
    TemplateExercise: _template_owned,
    UserFollow: lambda uid: UserFollow.follower_id == uid,
    WorkoutShare: lambda uid: WorkoutShare.user_id == uid,
    WorkoutLike: lambda uid: WorkoutLike.user_id == uid,
    CoachGroup: lambda uid: CoachGroup.coach_id == uid,
    GroupMember: _coaches_group,
}


def can_read(model: type, user_id: uuid.UUID) -> ColumnElement[bool]:
    """SELECT predicate for `model` as seen by `user_id`."""
    return READ_RULES[model](user_id)


def can_write(model: type, user_id: uuid.UUID) -> ColumnElement[bool]:
    """UPDATE/DELETE predicate for `model` as seen by `user_id`."""
    return WRITE_RULES[model](user_id)


def readable(model: type, user_id: uuid.UUID) -> Select:
    """`select(model)` restricted to rows the user may see."""
    return select(model).where(can_read(model, user_id))


def writable(model: type, user_id: uuid.UUID) -> Select:
    """`select(model)` restricted to rows the user may change or delete."""
    return select(model).where(can_write(model, user_id))
