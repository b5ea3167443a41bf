"""Build pipeline: Java sources -> per-file declarations -> mods -> bundle.

Stages run strictly in sequence and any failure aborts the build before the
artifact is written:

1. convert_all: one ``.d.ts`` per ``.java`` in a freshly cleared scratch tree
2. apply_mods: hand corrections against the scratch tree
3. bundle: group by namespace, dedupe imports, add header and trailer
4. remove the scratch tree (unless configured to keep it)
"""

from __future__ import annotations

import fnmatch
import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from javadts import __version__
from javadts.bundle import bundle_declarations, read_declarations, write_bundle
from javadts.config.constants import DECLARATION_SUFFIX, JAVA_SUFFIX
from javadts.config.models import JavaDtsConfig, ModsConfig, OutputConfig, SourceConfig
from javadts.core.errors import TranslationError
from javadts.core.logging import source_context
from javadts.core.progress import progress, task
from javadts.mods import BITWIG_MODS, Mod, ModResult, apply_mods, mod_from_spec
from javadts.render.document import render_compilation_unit
from javadts.render.options import RenderOptions
from javadts.syntax.parser import JavaParser
from javadts.templates import get_header, get_trailer

log = structlog.get_logger(__name__)


@dataclass
class BuildResult:
    """Outcome of a successful build."""

    out_file: Path
    files_converted: int
    namespaces: list[str] = field(default_factory=list)
    mod_results: list[ModResult] = field(default_factory=list)
    scratch_kept: bool = False
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def mods_applied(self) -> int:
        return sum(1 for r in self.mod_results if r.changed)


def discover_sources(root: Path, config: SourceConfig) -> list[Path]:
    """Java files under `root`, sorted by relative path.

    Files ending with a skip suffix or matching an exclude glob are left out.
    """
    sources: list[Path] = []
    for path in root.rglob(f"*{JAVA_SUFFIX}"):
        if not path.is_file():
            continue
        relative = path.relative_to(root).as_posix()
        if path.name.endswith(tuple(config.skip_suffixes)):
            log.debug("source_skipped", path=relative, reason="suffix")
            continue
        if any(fnmatch.fnmatch(relative, pattern) for pattern in config.exclude):
            log.debug("source_skipped", path=relative, reason="exclude")
            continue
        sources.append(path)
    return sorted(sources, key=lambda p: p.relative_to(root).as_posix())


def convert_file(parser: JavaParser, path: Path, options: RenderOptions) -> str:
    """Render one Java file to declaration text.

    Events logged while rendering carry the file as ``source``.

    Raises:
        TranslationError: On syntax errors or unsupported constructs, naming
            the file.
    """
    with source_context(str(path)):
        try:
            root = parser.parse_file(path)
            return render_compilation_unit(root, options).text
        except TranslationError as e:
            raise e.in_file(str(path)) from e


def convert_all(
    src: Path,
    dest: Path,
    source_config: SourceConfig,
    options: RenderOptions,
    parser: JavaParser | None = None,
) -> list[Path]:
    """Convert every source under `src` into a mirrored tree under `dest`.

    `dest` is cleared first so files from earlier runs never reach a bundle.
    """
    if dest.exists():
        shutil.rmtree(dest)
    dest.mkdir(parents=True)

    parser = parser or JavaParser()
    sources = discover_sources(src, source_config)
    written: list[Path] = []
    for path in progress(sources, desc="Converting"):
        relative = path.relative_to(src)
        target = dest / relative.with_name(relative.name.removesuffix(JAVA_SUFFIX) + DECLARATION_SUFFIX)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(convert_file(parser, path, options), encoding="utf-8")
        log.debug("file_converted", source=relative.as_posix(), target=str(target))
        written.append(target)

    log.info("sources_converted", count=len(written), dest=str(dest))
    return written


def configured_mods(config: ModsConfig) -> list[Mod]:
    """Built-in mods (when enabled) followed by mods declared in config."""
    mods: list[Mod] = list(BITWIG_MODS) if config.builtin else []
    mods.extend(mod_from_spec(spec) for spec in config.extra)
    return mods


def artifact_header(config: OutputConfig) -> str:
    if config.header is not None:
        return config.header
    return get_header(config.api_version, __version__)


def artifact_trailer(config: OutputConfig) -> str:
    if config.trailer_path is not None:
        return config.trailer_path.read_text(encoding="utf-8")
    return get_trailer()


def build(
    config: JavaDtsConfig,
    *,
    mods: Iterable[Mod] | None = None,
    parser: JavaParser | None = None,
) -> BuildResult:
    """Run the full pipeline and write the bundled artifact.

    Args:
        config: Resolved configuration.
        mods: Replaces the mods derived from ``config.mods`` when given.
        parser: Parser to reuse; a new one is created otherwise.

    Raises:
        JavaDtsError: Any stage failure; nothing is written in that case.
    """
    options = RenderOptions.from_config(config.translate)
    scratch = config.output.scratch_dir
    timings: dict[str, float] = {}

    with task("Converting Java sources") as stage:
        written = convert_all(config.source.root, scratch, config.source, options, parser)
    timings[stage.name] = stage.elapsed

    mod_results: list[ModResult] = []
    if config.mods.enabled:
        selected = list(mods) if mods is not None else configured_mods(config.mods)
        with task("Applying mods") as stage:
            mod_results = apply_mods(scratch, selected, strict=config.mods.strict)
        timings[stage.name] = stage.elapsed

    with task("Bundling declarations") as stage:
        declarations = read_declarations(scratch)
        text = bundle_declarations(
            declarations,
            header=artifact_header(config.output),
            trailer=artifact_trailer(config.output),
        )
        write_bundle(config.output.out_file, text)
    timings[stage.name] = stage.elapsed

    if not config.output.keep_scratch:
        shutil.rmtree(scratch)

    namespaces = sorted({d.namespace for d in declarations})
    log.info(
        "build_complete",
        out_file=str(config.output.out_file),
        files=len(written),
        namespaces=len(namespaces),
        timings={name: round(seconds, 3) for name, seconds in timings.items()},
    )
    return BuildResult(
        out_file=config.output.out_file,
        files_converted=len(written),
        namespaces=namespaces,
        mod_results=mod_results,
        scratch_kept=config.output.keep_scratch,
        timings=timings,
    )
