"""Unit tests for the per-entity converters."""

from datetime import datetime, timezone

import pytest

from appstream.conversion.helpers.content_rating_converter import (
    ContentRatingConverter,
)
from appstream.conversion.helpers.media_converter import (
    IconConverter,
    ImageConverter,
    ScreenshotConverter,
    VideoConverter,
)
from appstream.conversion.helpers.release_converter import (
    ArtifactConverter,
    IssueConverter,
    ReleaseConverter,
)
from appstream.conversion.helpers.requirement_converter import RequirementConverter
from appstream.conversion.helpers.variant_converter import (
    BundleConverter,
    CategoryConverter,
    KudoConverter,
    LanguageConverter,
    LaunchableConverter,
    MetadataConverter,
    ProjectUrlConverter,
    ProvideConverter,
    SizeConverter,
    TranslationConverter,
)
from appstream.exceptions import (
    DateTimeParseError,
    InvalidTagError,
    InvalidValueError,
    MissingAttributeError,
    MissingTagError,
    MissingValueError,
    UrlParseError,
)
from appstream.models import (
    AppId,
    ArtifactKind,
    BundleKind,
    CachedIcon,
    CategoryKind,
    ChecksumKind,
    Compare,
    ContentRatingVersion,
    ContentState,
    Control,
    ControlRequirement,
    DisplayLengthRequirement,
    DisplayLengthSize,
    FirmwareKind,
    IdRequirement,
    ImageKind,
    IssueKind,
    KudoKind,
    LaunchableKind,
    LocalIcon,
    OtherRequirement,
    ProjectUrlKind,
    ProvideKind,
    ReleaseKind,
    ReleaseUrgency,
    RemoteIcon,
    Side,
    SizeKind,
    StockIcon,
    TranslationKind,
)

# ---------------------------------------------------------------------------
#                               ICONS / MEDIA
# ---------------------------------------------------------------------------


class TestIconConverter:
    def test_remote_icon(self, xml):
        icon = IconConverter.convert(xml('<icon type="remote">http://x/y.png</icon>'))
        assert isinstance(icon, RemoteIcon)
        assert str(icon.url) == "http://x/y.png"
        assert icon.width is None and icon.height is None

    def test_untyped_icon_is_local(self, xml):
        icon = IconConverter.convert(xml("<icon>foo.png</icon>"))
        assert icon == LocalIcon(path="foo.png")

    def test_stock_and_cached(self, xml):
        assert IconConverter.convert(
            xml('<icon type="stock">web-browser</icon>')
        ) == StockIcon(name="web-browser")

        cached = IconConverter.convert(
            xml('<icon type="cached" width="64" height="64" scale="2">a.png</icon>')
        )
        assert cached == CachedIcon(path="a.png", width=64, height=64, scale=2)

    def test_unknown_type_reads_as_local(self, xml):
        icon = IconConverter.convert(xml('<icon type="hologram">/opt/x.png</icon>'))
        assert isinstance(icon, LocalIcon)

    def test_bad_remote_url(self, xml):
        with pytest.raises(UrlParseError):
            IconConverter.convert(xml('<icon type="remote">nope</icon>'))

    def test_bad_dimension(self, xml):
        with pytest.raises(InvalidValueError) as exc:
            IconConverter.convert(xml('<icon type="cached" width="wide">a.png</icon>'))
        assert (exc.value.attr, exc.value.tag) == ("width", "icon")

    def test_zero_scale(self, xml):
        with pytest.raises(InvalidValueError) as exc:
            IconConverter.convert(xml('<icon type="cached" scale="0">a.png</icon>'))
        assert (exc.value.attr, exc.value.tag) == ("scale", "icon")


class TestScreenshotConverter:
    def test_default_screenshot(self, xml):
        shot = ScreenshotConverter.convert(
            xml(
                """
                <screenshot type="default">
                  <caption>Main</caption>
                  <caption xml:lang="de">Haupt</caption>
                  <image type="thumbnail" width="224" height="168">https://e.org/t.png</image>
                  <image>https://e.org/s.png</image>
                  <video codec="av1" container="mkv" width="1600">https://e.org/v.mkv</video>
                </screenshot>
                """
            )
        )
        assert shot.is_default is True
        assert shot.caption.get_for_locale("de") == "Haupt"
        assert [i.kind for i in shot.images] == [ImageKind.THUMBNAIL, ImageKind.SOURCE]
        assert shot.images[0].width == 224
        assert shot.videos[0].codec == "av1"
        assert shot.videos[0].container == "mkv"

    def test_only_the_sentinel_marks_default(self, xml):
        assert ScreenshotConverter.convert(xml("<screenshot/>")).is_default is False
        assert (
            ScreenshotConverter.convert(xml('<screenshot type="extra"/>')).is_default
            is False
        )

    def test_image_kind_is_strict(self, xml):
        with pytest.raises(InvalidValueError) as exc:
            ImageConverter.convert(xml('<image type="poster">https://e.org/a.png</image>'))
        assert (exc.value.value, exc.value.attr, exc.value.tag) == (
            "poster",
            "type",
            "image",
        )

    def test_video_without_url(self, xml):
        with pytest.raises(MissingValueError):
            VideoConverter.convert(xml("<video/>"))


# ---------------------------------------------------------------------------
#                               VARIANTS
# ---------------------------------------------------------------------------


class TestBundleConverter:
    def test_missing_type_is_fatal(self, xml):
        with pytest.raises(MissingAttributeError) as exc:
            BundleConverter.convert(xml("<bundle>foo</bundle>"))
        assert (exc.value.attr, exc.value.tag) == ("type", "bundle")

    def test_flatpak_requires_sdk(self, xml):
        with pytest.raises(MissingAttributeError) as exc:
            BundleConverter.convert(
                xml('<bundle type="flatpak">app/org.x/x86_64/stable</bundle>')
            )
        assert (exc.value.attr, exc.value.tag) == ("sdk", "bundle")

    def test_flatpak_empty_sdk_is_missing(self, xml):
        with pytest.raises(MissingAttributeError) as exc:
            BundleConverter.convert(
                xml('<bundle type="flatpak" sdk="">app/org.x/x86_64/stable</bundle>')
            )
        assert (exc.value.attr, exc.value.tag) == ("sdk", "bundle")

    def test_flatpak(self, xml):
        bundle = BundleConverter.convert(
            xml(
                '<bundle type="flatpak" sdk="org.gnome.Sdk//45" '
                'runtime="org.gnome.Platform//45">app/org.x/x86_64/stable</bundle>'
            )
        )
        assert bundle.kind is BundleKind.FLATPAK
        assert bundle.sdk == "org.gnome.Sdk//45"
        assert bundle.runtime == "org.gnome.Platform//45"
        assert bundle.reference == "app/org.x/x86_64/stable"

    def test_unknown_type_is_strict(self, xml):
        with pytest.raises(InvalidValueError):
            BundleConverter.convert(xml('<bundle type="deb">foo</bundle>'))


class TestProvideConverter:
    def test_firmware_literal(self, xml):
        provide = ProvideConverter.convert(
            xml("<firmware type='runtime'>ipw2200-bss.fw</firmware>")
        )
        assert provide.kind is ProvideKind.FIRMWARE
        assert provide.firmware_kind is FirmwareKind.RUNTIME
        assert provide.value == "ipw2200-bss.fw"

    def test_firmware_kind_is_strict(self, xml):
        with pytest.raises(InvalidValueError):
            ProvideConverter.convert(xml("<firmware type='magic'>a.fw</firmware>"))
        with pytest.raises(MissingAttributeError):
            ProvideConverter.convert(xml("<firmware>a.fw</firmware>"))

    def test_children(self, xml):
        provides = ProvideConverter.convert_children(
            xml(
                "<provides><binary>contrast</binary><dbus>org.x.Y</dbus>"
                "<python3>foo</python3><id>org.x.Old</id></provides>"
            )
        )
        assert [p.kind for p in provides] == [
            ProvideKind.BINARY,
            ProvideKind.DBUS,
            ProvideKind.PYTHON3,
            ProvideKind.ID,
        ]

    def test_unknown_provide_tag(self, xml):
        with pytest.raises(InvalidTagError) as exc:
            ProvideConverter.convert(xml("<teleporter>x</teleporter>"))
        assert exc.value.tag == "teleporter"


class TestPermissiveVariants:
    def test_url_known_and_unknown(self, xml):
        homepage = ProjectUrlConverter.convert(
            xml('<url type="homepage">https://example.com/</url>')
        )
        assert homepage.kind is ProjectUrlKind.HOMEPAGE
        assert homepage.raw_type is None

        vcs = ProjectUrlConverter.convert(
            xml('<url type="vcs-browser">https://example.com/git</url>')
        )
        assert vcs.kind is ProjectUrlKind.UNKNOWN
        assert vcs.raw_type == "vcs-browser"

    def test_url_type_is_mandatory(self, xml):
        with pytest.raises(MissingAttributeError) as exc:
            ProjectUrlConverter.convert(xml("<url>https://example.com/</url>"))
        assert (exc.value.attr, exc.value.tag) == ("type", "url")

    def test_launchable(self, xml):
        launchable = LaunchableConverter.convert(
            xml('<launchable type="desktop-id">org.x.desktop</launchable>')
        )
        assert launchable.kind is LaunchableKind.DESKTOP_ID
        assert launchable.value == "org.x.desktop"

        other = LaunchableConverter.convert(
            xml('<launchable type="shortcut">x</launchable>')
        )
        assert (other.kind, other.raw_type) == (LaunchableKind.UNKNOWN, "shortcut")

        with pytest.raises(MissingAttributeError):
            LaunchableConverter.convert(xml("<launchable>x</launchable>"))

    def test_translation(self, xml):
        translation = TranslationConverter.convert(
            xml('<translation type="qt">contrast</translation>')
        )
        assert (translation.kind, translation.domain) == (TranslationKind.QT, "contrast")
        unknown = TranslationConverter.convert(
            xml('<translation type="fluent">contrast</translation>')
        )
        assert unknown.kind is TranslationKind.UNKNOWN
        assert unknown.raw_type == "fluent"

    def test_category_and_kudo(self, xml):
        category = CategoryConverter.convert(xml("<category>X-GNOME-Design</category>"))
        assert (category.kind, category.name) == (CategoryKind.UNKNOWN, "X-GNOME-Design")
        assert CategoryConverter.convert(xml("<category>Game</category>")).kind is (
            CategoryKind.GAME
        )
        assert KudoConverter.convert(xml("<kudo>HiDpiIcon</kudo>")).kind is (
            KudoKind.HI_DPI_ICON
        )
        assert KudoConverter.convert(xml("<kudo>Shiny</kudo>")).kind is KudoKind.UNKNOWN


class TestSmallValues:
    def test_language(self, xml):
        lang = LanguageConverter.convert(xml('<lang percentage="96">de</lang>'))
        assert (lang.locale, lang.percentage) == ("de", 96)
        with pytest.raises(InvalidValueError):
            LanguageConverter.convert(xml('<lang percentage="140">de</lang>'))

    def test_size(self, xml):
        size = SizeConverter.convert(xml('<size type="installed">42000</size>'))
        assert (size.kind, size.value) == (SizeKind.INSTALLED, 42000)
        with pytest.raises(InvalidValueError):
            SizeConverter.convert(xml('<size type="download">many</size>'))

    def test_metadata_values(self, xml):
        values = MetadataConverter.convert(
            xml('<custom><value key="a">1</value><value key="b"/></custom>')
        )
        assert values == {"a": "1", "b": None}
        with pytest.raises(MissingAttributeError):
            MetadataConverter.convert(xml("<custom><value>1</value></custom>"))


# ---------------------------------------------------------------------------
#                               RELEASES
# ---------------------------------------------------------------------------


class TestReleaseConverter:
    def test_timestamp_alias(self, xml):
        release = ReleaseConverter.convert(
            xml("<release version='1.2' timestamp='1397253600'/>")
        )
        assert release.date == datetime(2014, 4, 11, 22, 0, tzinfo=timezone.utc)
        assert release.kind is ReleaseKind.STABLE
        assert release.urgency is ReleaseUrgency.MEDIUM

    def test_calendar_date(self, xml):
        release = ReleaseConverter.convert(xml("<release version='1.0' date='2012-08-26'/>"))
        assert release.date == datetime(2012, 8, 26, tzinfo=timezone.utc)

    def test_date_eol_is_independent(self, xml):
        release = ReleaseConverter.convert(
            xml("<release version='1.0' date_eol='1397253600'/>")
        )
        assert release.date is None
        assert release.date_eol == datetime(2014, 4, 11, 22, 0, tzinfo=timezone.utc)

    def test_bad_date(self, xml):
        with pytest.raises(DateTimeParseError) as exc:
            ReleaseConverter.convert(xml("<release version='1.0' date='soon'/>"))
        assert exc.value.attr == "date"

    def test_version_is_required(self, xml):
        with pytest.raises(MissingAttributeError) as exc:
            ReleaseConverter.convert(xml("<release date='2012-08-26'/>"))
        assert (exc.value.attr, exc.value.tag) == ("version", "release")

    def test_strict_kind_and_urgency(self, xml):
        with pytest.raises(InvalidValueError):
            ReleaseConverter.convert(xml("<release version='1' type='nightly'/>"))
        with pytest.raises(InvalidValueError):
            ReleaseConverter.convert(xml("<release version='1' urgency='meh'/>"))

    def test_nested_structure(self, xml):
        release = ReleaseConverter.convert(
            xml(
                """
                <release version="2.0" type="development" urgency="low">
                  <description><p>Fixes</p></description>
                  <url>https://example.com/changes/2.0</url>
                  <size type="download">10</size>
                  <issues><issue type="cve">CVE-2024-1</issue></issues>
                  <artifacts>
                    <artifact type="source">
                      <location>https://example.com/src.tar.xz</location>
                      <checksum type="blake3">abc</checksum>
                    </artifact>
                  </artifacts>
                </release>
                """
            )
        )
        assert release.kind is ReleaseKind.DEVELOPMENT
        assert release.urgency is ReleaseUrgency.LOW
        assert release.description.get_default() == "<p>Fixes</p>"
        assert str(release.url) == "https://example.com/changes/2.0"
        assert release.sizes[0].value == 10
        assert release.issues[0].kind is IssueKind.CVE
        assert release.artifacts[0].kind is ArtifactKind.SOURCE
        assert release.artifacts[0].checksums[0].kind is ChecksumKind.BLAKE3


class TestArtifactConverter:
    def test_location_is_required(self, xml):
        with pytest.raises(MissingTagError) as exc:
            ArtifactConverter.convert(xml("<artifact type='binary'/>"))
        assert exc.value.tag == "location"

    def test_type_is_required_and_strict(self, xml):
        with pytest.raises(MissingAttributeError):
            ArtifactConverter.convert(
                xml("<artifact><location>https://e.org/a</location></artifact>")
            )
        with pytest.raises(InvalidValueError):
            ArtifactConverter.convert(
                xml("<artifact type='both'><location>https://e.org/a</location></artifact>")
            )

    def test_bundle_inside_artifact(self, xml):
        artifact = ArtifactConverter.convert(
            xml(
                "<artifact type='binary' platform='x86_64-linux-gnu'>"
                "<location>https://e.org/a.snap</location>"
                "<filename>a.snap</filename>"
                "<bundle type='snap'>a</bundle>"
                "</artifact>"
            )
        )
        assert artifact.platform == "x86_64-linux-gnu"
        assert artifact.filename == "a.snap"
        assert artifact.bundles[0].kind is BundleKind.SNAP


class TestIssueConverter:
    def test_defaults_to_generic(self, xml):
        issue = IssueConverter.convert(
            xml("<issue url='https://bugs.example.com/1'>1</issue>")
        )
        assert issue.kind is IssueKind.GENERIC
        assert str(issue.url) == "https://bugs.example.com/1"

    def test_identifier_is_required(self, xml):
        with pytest.raises(MissingValueError):
            IssueConverter.convert(xml("<issue type='cve'/>"))


# ---------------------------------------------------------------------------
#                           CONTENT RATING
# ---------------------------------------------------------------------------


class TestContentRatingConverter:
    def test_attributes(self, xml):
        rating = ContentRatingConverter.convert(
            xml(
                '<content_rating type="oars-1.1">'
                '<content_attribute id="violence-cartoon">mild</content_attribute>'
                '<content_attribute id="social-chat">intense</content_attribute>'
                "</content_rating>"
            )
        )
        assert rating.version is ContentRatingVersion.OARS_1_1
        assert rating.get("social-chat") is ContentState.INTENSE

    def test_version_is_permissive(self, xml):
        future = ContentRatingConverter.convert(xml('<content_rating type="oars-2.0"/>'))
        assert future.version is ContentRatingVersion.UNKNOWN
        assert future.raw_type == "oars-2.0"

        untyped = ContentRatingConverter.convert(xml("<content_rating/>"))
        assert untyped.version is ContentRatingVersion.UNKNOWN
        assert untyped.raw_type is None

        known = ContentRatingConverter.convert(xml('<content_rating type="oars-1.1"/>'))
        assert known.raw_type is None

    def test_intensity_is_strict(self, xml):
        with pytest.raises(InvalidValueError):
            ContentRatingConverter.convert(
                xml(
                    '<content_rating type="oars-1.0">'
                    '<content_attribute id="drugs-alcohol">lots</content_attribute>'
                    "</content_rating>"
                )
            )

    def test_newest_keeps_the_highest_version(self, xml):
        v10 = ContentRatingConverter.convert(xml('<content_rating type="oars-1.0"/>'))
        v11 = ContentRatingConverter.convert(xml('<content_rating type="oars-1.1"/>'))
        unknown = ContentRatingConverter.convert(xml("<content_rating/>"))

        assert ContentRatingConverter.newest(None, v10) is v10
        assert ContentRatingConverter.newest(v10, v11) is v11
        assert ContentRatingConverter.newest(v11, v10) is v11
        assert ContentRatingConverter.newest(unknown, v10) is v10
        assert ContentRatingConverter.newest(v10, unknown) is v10


# ---------------------------------------------------------------------------
#                             REQUIREMENTS
# ---------------------------------------------------------------------------


class TestRequirementConverter:
    def test_display_length_pixels(self, xml):
        requirement = RequirementConverter.convert(
            xml("<display_length compare='ge'>360</display_length>")
        )
        assert requirement == DisplayLengthRequirement(
            compare=Compare.GE, side=Side.SHORTEST, pixels=360
        )

    def test_display_length_named_size(self, xml):
        requirement = RequirementConverter.convert(
            xml("<display_length compare='eq' side='longest'>small</display_length>")
        )
        assert requirement.size is DisplayLengthSize.SMALL
        assert requirement.compare is Compare.EQ
        assert requirement.side is Side.LONGEST

    def test_display_length_invalid_value(self, xml):
        with pytest.raises(InvalidValueError) as exc:
            RequirementConverter.convert(xml("<display_length>huge</display_length>"))
        assert (exc.value.value, exc.value.attr, exc.value.tag) == (
            "huge",
            "$value",
            "display_length",
        )

    def test_control(self, xml):
        assert RequirementConverter.convert(
            xml("<control>console</control>")
        ) == ControlRequirement(control=Control.CONSOLE)
        assert RequirementConverter.convert(
            xml("<control>tv-remote</control>")
        ) == ControlRequirement(control=Control.TV_REMOTE)

    def test_id_with_version(self, xml):
        requirement = RequirementConverter.convert(
            xml("<id version='1.2' compare='ge'>org.gnome.Platform</id>")
        )
        assert requirement == IdRequirement(
            id=AppId("org.gnome.Platform"), version="1.2", compare=Compare.GE
        )

    def test_unmodelled_items_become_other(self, xml):
        requirements = RequirementConverter.convert_children(
            xml(
                "<requires><memory>2048</memory><kernel>Linux</kernel>"
                "<control>touch</control></requires>"
            )
        )
        assert requirements[:2] == [
            OtherRequirement(tag="memory"),
            OtherRequirement(tag="kernel"),
        ]
        assert isinstance(requirements[2], ControlRequirement)
