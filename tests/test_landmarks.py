import numpy as np

from dentalai.anatomy.landmarks import MEDIAPIPE_GROUPS, LandmarkGroup, LandmarkMap, LandmarkRole
from dentalai.schemas import Keypoint
from dentalai.vision.detector import mesh_to_keypoints


def test_roles_use_exact_names_and_first_match():
    lm = LandmarkMap.from_keypoints([
        {"name": "noseTipish", "x": 9, "y": 9},
        {"name": "noseTip", "x": 1, "y": 2},
        {"name": "noseTip", "x": 5, "y": 6},
    ])
    assert lm.get(LandmarkRole.NASION).tolist() == [1.0, 2.0]
    assert lm.get(LandmarkRole.CHIN) is None


def test_groups_use_substring_match(keypoints):
    lm = LandmarkMap.from_keypoints(keypoints + [{"name": "noseTip", "x": 1, "y": 1}])
    assert lm.count(LandmarkGroup.JAWLINE) == 5
    assert lm.count(LandmarkGroup.FOREHEAD) == 3
    assert lm.count(LandmarkGroup.NOSE) == 2
    # corner names do not contain "lips"
    assert lm.count(LandmarkGroup.LIPS) == 4
    assert lm.group(LandmarkGroup.JAWLINE).shape == (5, 2)


def test_accepts_keypoint_models():
    lm = LandmarkMap.from_keypoints([Keypoint(name="chin", x=3, y=4, z=-1.0)])
    assert lm.get(LandmarkRole.CHIN).tolist() == [3.0, 4.0]
    assert len(lm) == 1


def test_mesh_to_keypoints_names_every_group():
    mesh = np.arange(478 * 2, dtype=float).reshape(478, 2)
    lm = LandmarkMap.from_keypoints(mesh_to_keypoints(mesh))
    for role in LandmarkRole:
        assert lm.get(role) is not None
    assert lm.count(LandmarkGroup.JAWLINE) == len(MEDIAPIPE_GROUPS[LandmarkGroup.JAWLINE])
    assert lm.count(LandmarkGroup.LEFT_EYE) == len(MEDIAPIPE_GROUPS[LandmarkGroup.LEFT_EYE])
    assert lm.get(LandmarkRole.CHIN).tolist() == mesh[152].tolist()
