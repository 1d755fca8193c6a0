# SPDX-License-Identifier: Apache-2.0
"""Named landmark roles and the lookup map built from detector keypoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Union

import numpy as np

from dentalai.schemas import Keypoint


class LandmarkRole(str, Enum):
    """Single landmarks, matched by exact keypoint name."""

    NASION = "noseTip"
    CHIN = "chin"
    FOREHEAD_CENTER = "foreheadCenter"
    LIP_CORNER_LEFT = "lipCornerLeft"
    LIP_CORNER_RIGHT = "lipCornerRight"


class LandmarkGroup(str, Enum):
    """Landmark clusters, matched by substring of the keypoint name."""

    LEFT_EYE = "leftEye"
    RIGHT_EYE = "rightEye"
    NOSE = "nose"
    MOUTH = "mouth"
    JAWLINE = "jawline"
    FOREHEAD = "forehead"
    LIPS = "lips"


# MediaPipe Face Mesh indices used to emit the named keypoints above.
MEDIAPIPE_ROLES: Dict[LandmarkRole, int] = {
    LandmarkRole.NASION: 1,
    LandmarkRole.CHIN: 152,
    LandmarkRole.FOREHEAD_CENTER: 10,
    LandmarkRole.LIP_CORNER_LEFT: 61,
    LandmarkRole.LIP_CORNER_RIGHT: 291,
}

MEDIAPIPE_GROUPS: Dict[LandmarkGroup, List[int]] = {
    # lower half of the face oval, ear to ear through the chin
    LandmarkGroup.JAWLINE: [
        234, 93, 132, 58, 172, 136, 150, 149, 176, 148, 152,
        377, 400, 378, 379, 365, 397, 288, 361, 323, 454,
    ],
    # upper half of the face oval, temple to temple
    LandmarkGroup.FOREHEAD: [127, 162, 21, 54, 103, 67, 109, 10, 338, 297, 332, 284, 251, 389, 356],
    LandmarkGroup.LIPS: [61, 146, 91, 181, 84, 17, 314, 405, 321, 375, 291, 409, 270, 269, 267, 0, 37, 39, 40, 185],
    LandmarkGroup.MOUTH: [78, 95, 88, 178, 87, 14, 317, 402, 318, 324, 308, 415, 310, 311, 312, 13, 82, 81, 80, 191],
    # subject's left eye, which appears on the right of the image
    LandmarkGroup.LEFT_EYE: [263, 249, 390, 373, 374, 380, 381, 382, 362, 466, 388, 387, 386, 385, 384, 398],
    LandmarkGroup.RIGHT_EYE: [33, 7, 163, 144, 145, 153, 154, 155, 133, 246, 161, 160, 159, 158, 157, 173],
    LandmarkGroup.NOSE: [168, 6, 197, 195, 5, 4, 2, 98, 327],
}


KeypointLike = Union[Keypoint, Mapping[str, object]]


def _coerce(kp: KeypointLike) -> Keypoint:
    if isinstance(kp, Keypoint):
        return kp
    return Keypoint.model_validate(kp)


@dataclass(frozen=True, eq=False)
class LandmarkMap:
    """Typed view over a keypoint set, built once per analysis.

    ``roles`` holds the first keypoint whose name equals a role name;
    ``groups`` holds every keypoint whose name contains a group name, in
    input order, as an ``(N, 2)`` array.
    """

    keypoints: List[Keypoint]
    roles: Dict[LandmarkRole, np.ndarray] = field(default_factory=dict)
    groups: Dict[LandmarkGroup, np.ndarray] = field(default_factory=dict)

    @classmethod
    def from_keypoints(cls, keypoints: Iterable[KeypointLike]) -> "LandmarkMap":
        kps = [_coerce(kp) for kp in keypoints]
        roles: Dict[LandmarkRole, np.ndarray] = {}
        members: Dict[LandmarkGroup, List[List[float]]] = {g: [] for g in LandmarkGroup}
        for kp in kps:
            for role in LandmarkRole:
                if kp.name == role.value and role not in roles:
                    roles[role] = np.array([kp.x, kp.y], dtype=float)
            for group in LandmarkGroup:
                if group.value in kp.name:
                    members[group].append([kp.x, kp.y])
        groups = {g: np.array(pts, dtype=float).reshape(-1, 2) for g, pts in members.items()}
        return cls(keypoints=kps, roles=roles, groups=groups)

    def __len__(self) -> int:
        return len(self.keypoints)

    def get(self, role: LandmarkRole) -> Optional[np.ndarray]:
        return self.roles.get(role)

    def group(self, group: LandmarkGroup) -> np.ndarray:
        return self.groups.get(group, np.empty((0, 2)))

    def count(self, group: LandmarkGroup) -> int:
        return len(self.group(group))
