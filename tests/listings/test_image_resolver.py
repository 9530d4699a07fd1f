from pathlib import Path

from staymate.schemas.property import Property
from staymate.services.image_resolver import ImageResolver
from tests.conftest import make_record

FALLBACK_PICTURE = "images/default_picture.jpg"
FALLBACK_PLAN = "images/default_floorplan.jpg"


def _resolver(asset_root: Path | None = None) -> ImageResolver:
    return ImageResolver(
        fallback_picture=FALLBACK_PICTURE,
        fallback_floor_plan=FALLBACK_PLAN,
        asset_root=asset_root,
    )


def test_missing_floor_plan_uses_fallback() -> None:
    listing = Property.model_validate(make_record(floorPlan=None))

    assert _resolver().floor_plan(listing) == FALLBACK_PLAN


def test_floor_plan_passes_through_when_present() -> None:
    listing = Property.model_validate(make_record(floorPlan=" images/plan.jpg "))

    assert _resolver().floor_plan(listing) == "images/plan.jpg"


def test_picture_falls_back_to_gallery_then_default() -> None:
    from_gallery = Property.model_validate(make_record(picture=None, pictures=["images/g1.jpg"]))
    nothing = Property.model_validate(make_record(picture=None, pictures=[]))

    assert _resolver().picture(from_gallery) == "images/g1.jpg"
    assert _resolver().picture(nothing) == FALLBACK_PICTURE


def test_gallery_is_never_empty() -> None:
    listing = Property.model_validate(make_record(picture="images/card.jpg", pictures=[]))

    assert _resolver().gallery(listing) == ["images/card.jpg"]


def test_asset_root_filters_missing_files(tmp_path: Path) -> None:
    (tmp_path / "images").mkdir()
    (tmp_path / "images" / "present.jpg").write_bytes(b"jpg")
    listing = Property.model_validate(
        make_record(
            picture="images/absent.jpg",
            pictures=["images/absent.jpg", "/images/present.jpg"],
            floorPlan="images/absent-plan.jpg",
        )
    )
    resolver = _resolver(tmp_path)

    assert resolver.gallery(listing) == ["/images/present.jpg"]
    assert resolver.picture(listing) == "/images/present.jpg"
    assert resolver.floor_plan(listing) == FALLBACK_PLAN


def test_remote_urls_skip_filesystem_checks(tmp_path: Path) -> None:
    url = "https://cdn.example.com/listing/plan.jpg"
    listing = Property.model_validate(make_record(floorPlan=url))

    assert _resolver(tmp_path).floor_plan(listing) == url
