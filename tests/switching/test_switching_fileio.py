"""Tests for SwitchingFileIO.

Critical Invariants:
- Every returned handle reports the logical location
- The backend receives the rewritten (physical) location
- Backend failures propagate unchanged
- No operation succeeds before a successful initialize()
"""

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from fileswitch import (
    AdapterStateError,
    BackendConstructionError,
    ConfigurationError,
    ManifestRef,
    MemoryFileIO,
    RewriteError,
    SwitchingFileIO,
)

S3_TO_MEM = {"^s3://": "mem://"}


# Initialization


def test_initialize_binds_backend(make_io, memory_backend):
    io = make_io(S3_TO_MEM)

    assert io.initialized
    assert io.backend is memory_backend
    assert [rule.pattern for rule in io.rules] == ["^s3://"]


def test_missing_delegate_leaves_adapter_uninitialized(binder):
    """CRITICAL: A failed initialize must not leave a half-working adapter."""
    io = SwitchingFileIO(binder)

    with pytest.raises(ConfigurationError):
        io.initialize({"protocol.mapping.^s3://": "mem://"})

    assert not io.initialized
    with pytest.raises(AdapterStateError):
        io.new_input("s3://b/k")


def test_bad_rule_fails_before_backend_is_built(binder, registry):
    built = []

    def tracked():
        built.append(1)
        return MemoryFileIO()

    registry.register("tracked", tracked)
    io = SwitchingFileIO(binder)

    with pytest.raises(ConfigurationError):
        io.initialize({"io-impl-delegate": "tracked", "protocol.mapping.^s3://(": "mem://"})

    assert built == []
    assert not io.initialized


def test_backend_construction_failure_propagates(binder, registry):
    def broken():
        raise RuntimeError("boom")

    registry.register("broken", broken)
    io = SwitchingFileIO(binder)

    with pytest.raises(BackendConstructionError):
        io.initialize({"io-impl-delegate": "broken"})
    assert not io.initialized


def test_initialize_twice_fails(make_io):
    io = make_io(S3_TO_MEM)

    with pytest.raises(AdapterStateError, match="already initialized"):
        io.initialize({"io-impl-delegate": "MemoryBackend"})


@pytest.mark.parametrize(
    "operation",
    [
        lambda io: io.new_input("s3://b/k"),
        lambda io: io.new_input("s3://b/k", 10),
        lambda io: io.new_input(ManifestRef("s3://b/m.avro", 10)),
        lambda io: io.new_output("s3://b/k"),
        lambda io: io.delete("s3://b/k"),
        lambda io: io.backend,
        lambda io: io.resolve("s3://b/k"),
    ],
)
def test_operations_before_initialize_fail(binder, operation):
    with pytest.raises(AdapterStateError):
        operation(SwitchingFileIO(binder))


def test_properties_are_a_read_only_snapshot(make_io):
    io = make_io(S3_TO_MEM, extra={"k": "v"})

    assert io.properties["k"] == "v"
    with pytest.raises(TypeError):
        io.properties["k"] = "x"  # type: ignore[index]


# Operations


def test_new_input_rewrites_and_preserves_location(make_io, memory_backend):
    io = make_io(S3_TO_MEM)

    handle = io.new_input("s3://b/k")

    assert memory_backend.requested == ["mem://b/k"]
    assert handle.location == "s3://b/k"
    assert handle.unwrap().location == "mem://b/k"


def test_new_input_with_length_passes_length(make_io, memory_backend):
    io = make_io(S3_TO_MEM)

    handle = io.new_input("s3://b/k", 123)

    assert handle.get_length() == 123
    assert handle.location == "s3://b/k"


def test_new_input_for_manifest(make_io, memory_backend):
    io = make_io(S3_TO_MEM)

    handle = io.new_input(ManifestRef(path="s3://b/metadata/snap-1.avro", length=77))

    assert memory_backend.requested == ["mem://b/metadata/snap-1.avro"]
    assert handle.location == "s3://b/metadata/snap-1.avro"
    assert handle.get_length() == 77


def test_manifest_with_explicit_length_is_rejected(make_io, memory_backend):
    io = make_io(S3_TO_MEM)

    with pytest.raises(TypeError, match="manifest"):
        io.new_input(ManifestRef(path="s3://b/m.avro", length=77), 5)
    assert memory_backend.requested == []


def test_new_output_rewrites_and_preserves_location(make_io, memory_backend):
    io = make_io(S3_TO_MEM)

    handle = io.new_output("s3://b/k")
    with handle.create() as stream:
        stream.write(b"data")

    assert memory_backend.locations() == ["mem://b/k"]
    assert handle.location == "s3://b/k"
    assert handle.to_input_file().location == "s3://b/k"


def test_delete_rewrites(make_io, memory_backend):
    io = make_io(S3_TO_MEM)
    with io.new_output("s3://b/k").create() as stream:
        stream.write(b"data")

    io.delete("s3://b/k")

    assert memory_backend.locations() == []
    assert memory_backend.requested[-1] == "mem://b/k"


def test_delete_missing_propagates_backend_error(make_io):
    """Backend errors pass through untranslated."""
    io = make_io(S3_TO_MEM)

    with pytest.raises(FileNotFoundError, match="mem://b/missing"):
        io.delete("s3://b/missing")


def test_create_existing_propagates_backend_error(make_io):
    io = make_io(S3_TO_MEM)
    with io.new_output("s3://b/k").create() as stream:
        stream.write(b"x")

    with pytest.raises(FileExistsError):
        io.new_output("s3://b/k").create()


def test_unmatched_location_reaches_backend_unchanged(make_io, memory_backend):
    io = make_io(S3_TO_MEM)

    io.new_input("gs://b/k")

    assert memory_backend.requested == ["gs://b/k"]


def test_first_declared_rule_wins(make_io, memory_backend):
    io = make_io({"^s3://b/": "mem://first/", "^s3://": "mem://second/"})

    for _ in range(5):
        io.new_input("s3://b/k")

    assert set(memory_backend.requested) == {"mem://first/k"}


def test_malformed_replacement_fails_the_call(make_io, memory_backend):
    io = make_io({"^s3://": "mem://$3/"})

    with pytest.raises(RewriteError):
        io.new_output("s3://b/k")
    assert memory_backend.requested == []


def test_resolve_reports_physical_location(make_io):
    io = make_io({r"^s3://([^/]+)/": "mem://$1-bucket/"})

    assert io.resolve("s3://b/k") == "mem://b-bucket/k"


def test_from_settings(registry):
    from fileswitch import BackendBinder, SwitchingSettings

    settings_ = SwitchingSettings(
        _env_file=None, io_impl_delegate="memory", protocol_mappings=S3_TO_MEM
    )

    io = SwitchingFileIO.from_settings(settings_, BackendBinder(registry))

    assert io.resolve("s3://b/k") == "mem://b/k"


_segments = st.text(alphabet="abcxyz019-_./", min_size=0, max_size=20)


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(scheme=st.sampled_from(["s3", "s3a", "gs", "file"]), rest=_segments)
def test_every_handle_reports_logical_location(make_io, scheme, rest):
    """PROPERTY: For every location and operation, handles echo the logical location."""
    io = make_io({"^s3a?://": "mem://", "^gs://([^/]*)": "mem://gcs-$1"})
    location = f"{scheme}://{rest}"

    assert io.new_input(location).location == location
    assert io.new_input(location, 1).location == location
    assert io.new_input(ManifestRef(location, 1)).location == location
    assert io.new_output(location).location == location
    assert io.new_output(location).to_input_file().location == location
