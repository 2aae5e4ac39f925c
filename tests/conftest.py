"""Shared test fixtures for hukuk-analyzer tests."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

from hukuk_analyzer.analyzer import ClauseAnalyzer
from hukuk_analyzer.catalog import PatternCatalog
from hukuk_analyzer.ids import SequentialIdGenerator

FIXED_TIME = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_TIME


@pytest.fixture
def ids() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def catalog() -> PatternCatalog:
    return PatternCatalog.default()


@pytest.fixture
def analyzer(ids: SequentialIdGenerator, fixed_clock: Callable[[], datetime]) -> ClauseAnalyzer:
    return ClauseAnalyzer(id_generator=ids, clock=fixed_clock)


@pytest.fixture
def sample_contract_path() -> Path:
    """Path to the sample employment contract."""
    return Path(__file__).parent.parent / "examples" / "ornek_is_sozlesmesi.txt"


@pytest.fixture
def sample_contract_text(sample_contract_path: Path) -> str:
    return sample_contract_path.read_text(encoding="utf-8")


@pytest.fixture
def employment_text() -> str:
    """Three-paragraph employment snippet: parties, overtime, unlimited liability."""
    return (
        "Taraflar arasında iş sözleşmesi akdedilmiştir.\n\n"
        "Fazla çalışma haftalık 45 saati aşan çalışmalardır.\n\n"
        "Sınırsız sorumluluk kabul edilmiştir."
    )


@pytest.fixture
def lease_text() -> str:
    """A lease contract covering every clause the lease checklist requires."""
    return (
        "KİRA SÖZLEŞMESİ\n\n"
        "İşbu sözleşme, bir tarafta Mehmet Demir (Kiraya veren) ile diğer tarafta "
        "Deniz Kaya (Kiracı) arasında akdedilmiştir.\n\n"
        "Kiralanan taşınmaz İstanbul ili Kadıköy ilçesinde bulunan 3+1 dairedir.\n\n"
        "Aylık kira bedeli 25.000 TL olarak belirlenmiştir.\n\n"
        "Ödeme tarihi her ayın 5. günüdür. Kiracı kira bedelini kiraya veren hesabına yatırmakla yükümlüdür.\n\n"
        "Kira süresi 1 yıl olarak belirlenmiştir.\n\n"
        "Taraflar 30 gün önceden yazılı bildirimde bulunarak sözleşmeyi feshedebilir."
    )


@pytest.fixture
def tmp_contract_file(tmp_path: Path, employment_text: str) -> Path:
    file = tmp_path / "sozlesme.txt"
    file.write_text(employment_text, encoding="utf-8")
    return file


@pytest.fixture
def restore_root_logger():
    """Undo ``setup_logging`` changes to the root logger after a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
