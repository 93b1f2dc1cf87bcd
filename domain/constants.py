"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for field identifiers, labels and messages.
"""

PAGE_TITLE = "Selamat Datang"
PAGE_SUBTITLE = "Silakan lengkapi data diri Anda"

# Render order of the registration form
FIELD_NAMES = [
    "namaBapak", "namaIbu", "namaAdik", "namaKakak",
    "nik", "email", "namaKamu", "kataSandi",
]

# Fields that only need a non-blank value
NAME_FIELDS = ["namaBapak", "namaIbu", "namaAdik", "namaKakak", "namaKamu"]

FIELD_LABELS = {
    "namaBapak": "Nama Bapak",
    "namaIbu": "Nama Ibu",
    "namaAdik": "Nama Adik",
    "namaKakak": "Nama Kakak",
    "nik": "NIK",
    "email": "Email",
    "namaKamu": "Nama Kamu",
    "kataSandi": "Kata Sandi",
}

PLACEHOLDERS = {
    "namaBapak": "Masukkan nama bapak",
    "namaIbu": "Masukkan nama ibu",
    "namaAdik": "Nama adik",
    "namaKakak": "Nama kakak",
    "nik": "16 digit angka",
    "email": "contoh@email.com",
    "namaKamu": "Masukkan nama Anda",
    "kataSandi": "Minimal 100 karakter",
}

NIK_LENGTH = 16
NIK_HINT = "Nomor Induk Kependudukan"
PASSPHRASE_MIN_LENGTH = 100

# Validation messages
MSG_REQUIRED = "{label} wajib diisi"
MSG_NIK_NUMERIC = "NIK harus berupa angka"
MSG_NIK_LENGTH = "NIK harus tepat 16 digit"
MSG_EMAIL_FORMAT = "Format email tidak valid"
MSG_PASSPHRASE_SHORT = "Kata Sandi minimal 100 karakter ({count}/100)"
MSG_PASSPHRASE_SHORTFALL = "Kurang {missing} karakter lagi"

# (upper bound exclusive, level, label, meter color); the last tier has no bound
STRENGTH_TIERS = [
    (1, 0, "Belum diisi", "#334155"),
    (50, 1, "Sangat Lemah", "#EF4444"),
    (100, 2, "Lemah", "#F97316"),
    (150, 3, "Cukup Kuat", "#EAB308"),
    (None, 4, "Kuat", "#22C55E"),
]
STRENGTH_SEGMENTS = 4

# Confirmation summary rows; the passphrase is never listed
SUMMARY_FIELDS = [
    ("Nama", "namaKamu"),
    ("Email", "email"),
    ("NIK", "nik"),
    ("Nama Bapak", "namaBapak"),
    ("Nama Ibu", "namaIbu"),
    ("Nama Adik", "namaAdik"),
    ("Nama Kakak", "namaKakak"),
]

SUBMIT_READY_LABEL = "Daftar Sekarang"
SUBMIT_BLOCKED_LABEL = "Lengkapi Semua Data"
CONFIRM_TITLE = "Pendaftaran Berhasil!"
CONFIRM_SUBTITLE = "Berikut ringkasan data Anda"
CONFIRM_CLOSE_LABEL = "Tutup"

PHASE_EDITING = "editing"
PHASE_CONFIRMED = "confirmed"
