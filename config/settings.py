"""
Настройки проекта Transport Orders.

Все окна просмотра (lookahead) задаются в строках уже отфильтрованного
потока (пустые строки удалены, индексы плотные).
"""

from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
INPUT_DIR = DATA_DIR / "input"
OUTPUT_DIR = DATA_DIR / "output"

# YAML со списками ключевых слов для canHandle (стратегия -> ключевые слова)
KEYWORDS_FILE = PROJECT_ROOT / "transport_orders" / "parsing" / "keywords" / "pdf_parsers.yaml"

# Справочник стран для поиска ISO-кода по свободному тексту
COUNTRIES_FILE = PROJECT_ROOT / "transport_orders" / "parsing" / "keywords" / "countries.yaml"

# =============================================================================
# ВЛОЖЕНИЯ
# =============================================================================
# Имя файла, если вызывающая сторона его не передала
DEFAULT_ATTACHMENT_NAME = "unknown.pdf"

# Имя файла в сообщении об ошибке NoMatchingFormat
UNKNOWN_FILENAME = "unknown"

# =============================================================================
# ОКНА ПРОСМОТРА СЕКЦИЙ
# =============================================================================
COMPANY_LOOKAHEAD_SHORT = 5    # Ziegler: компания почти всегда сразу под якорем
COMPANY_LOOKAHEAD = 12         # Transalliance: между якорем и компанией бывает шум
STREET_LOOKAHEAD = 12
POSTAL_LOOKAHEAD = 12
PALLET_LOOKAHEAD = 12
CARGO_BLOCK_LOOKAHEAD = 40     # Описание груза у Transalliance далеко от якоря

# Окно вокруг строки груза (в обе стороны)
CARGO_MEASURE_WINDOW = 6       # вес / объём
CARGO_NUMBER_WINDOW = 3        # номер груза

# Поиск REF после строки с паллетами
REFERENCE_LOOKAHEAD = 8

# Convention B (доставка): окна поиска строк времени и даты
DELIVERY_TIME_LOOKAHEAD = 6
DELIVERY_DATE_LOOKAHEAD = 6

# =============================================================================
# ЗАКАЗЧИК
# =============================================================================
CUSTOMER_SIDE = "sender"

# Transalliance: блок отправителя лежит между маркером клиента и именем перевозчика
TRANSALLIANCE_CLIENT_MARKER = "Test Client"
TRANSALLIANCE_CARRIER_MARKER = "TRANSALLIANCE"

# Ziegler: ALL-CAPS заголовки, которые не могут быть городом
ZIEGLER_CITY_BLACKLIST = ["BOOKING", "INSTRUCTION"]

# Страна для британского почтового индекса в шапке Ziegler
ZIEGLER_CUSTOMER_COUNTRY = "GB"

# =============================================================================
# ФРАХТ
# =============================================================================
DEFAULT_CURRENCY = "EUR"
