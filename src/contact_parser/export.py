"""vCard and CSV serialization of parsed contacts."""

import csv
import io
import re
from collections.abc import Callable, Iterable, Sequence
from datetime import timezone

from contact_parser.models.contact import ParsedAddress, ParsedContact

PRODID = "-//contact-parser//Business Card Parser//EN"

# vCard TYPE parameter for each candidate label
_VCARD_TYPES = {
    "home": "HOME",
    "work": "WORK",
    "mobile": "CELL",
    "main": "VOICE",
    "fax": "FAX",
}

# Leading characters that spreadsheet apps evaluate as a formula
_FORMULA_PREFIXES = ("=", "+", "-", "@", "\t", "\r")

_INVALID_FILENAME_CHARS = re.compile(r'[:/\\?%*|"<>]')


def escape_vcard(value: str) -> str:
    """Escape backslash, comma, semicolon and newline for a vCard value."""
    return (
        value.replace("\\", "\\\\")
        .replace(",", "\\,")
        .replace(";", "\\;")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def sanitize_csv_value(value: str) -> str:
    """Neutralize spreadsheet formulas by prefixing a single quote."""
    if value.startswith(_FORMULA_PREFIXES):
        return f"'{value}"
    return value


def format_address(address: ParsedAddress) -> str:
    """Render an address on one line, e.g. ``1 Main St, Springfield, IL 62701``."""
    region = " ".join(p for p in (address.state, address.postal_code) if p)
    parts = [address.street, address.city, region, address.country]
    return ", ".join(p for p in parts if p)


def _vcard_type(label: str | None) -> str:
    if not label:
        return "WORK"
    return _VCARD_TYPES.get(label.lower(), "WORK")


def to_vcard(contact: ParsedContact) -> str:
    """
    Serialize a contact as a vCard 4.0 (RFC 6350) entry.

    Only candidates flagged valid are written. Social profiles are written
    as ``X-SOCIALPROFILE`` properties.

    Args:
        contact: Contact to serialize.

    Returns:
        vCard text with CRLF line endings.
    """
    lines = ["BEGIN:VCARD", "VERSION:4.0"]

    name_parts = (
        contact.family_name,
        contact.given_name,
        contact.middle_name,
        contact.name_prefix,
        contact.name_suffix,
    )
    lines.append("N:" + ";".join(escape_vcard(p or "") for p in name_parts))
    lines.append(f"FN:{escape_vcard(contact.full_name or 'Unknown')}")

    if contact.nickname:
        lines.append(f"NICKNAME:{escape_vcard(contact.nickname)}")

    if contact.organization_name:
        org = escape_vcard(contact.organization_name)
        if contact.department:
            org += f";{escape_vcard(contact.department)}"
        lines.append(f"ORG:{org}")

    if contact.job_title:
        lines.append(f"TITLE:{escape_vcard(contact.job_title)}")

    for phone in contact.phone_numbers:
        if phone.is_valid:
            number = "".join(ch for ch in phone.number if ch.isdigit() or ch == "+")
            lines.append(f"TEL;TYPE={_vcard_type(phone.label)}:{number}")

    for email in contact.email_addresses:
        if email.is_valid:
            lines.append(f"EMAIL;TYPE={_vcard_type(email.label)}:{escape_vcard(email.address)}")

    for url in contact.urls:
        if url.is_valid:
            lines.append(f"URL;TYPE={_vcard_type(url.label)}:{escape_vcard(url.url)}")

    for address in contact.postal_addresses:
        if address.is_valid:
            fields = ("", "", address.street, address.city, address.state,
                      address.postal_code, address.country)
            adr = ";".join(escape_vcard(f or "") for f in fields)
            lines.append(f"ADR;TYPE={_vcard_type(address.label)}:{adr}")

    for profile in contact.social_profiles:
        service = escape_vcard(profile.service.upper())
        value = escape_vcard(profile.url or profile.username)
        lines.append(f"X-SOCIALPROFILE;TYPE={service}:{value}")

    if contact.note:
        lines.append(f"NOTE:{escape_vcard(contact.note)}")

    revision = contact.parsed_at.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    lines.append(f"REV:{revision}")
    lines.append(f"PRODID:{PRODID}")
    lines.append("END:VCARD")

    return "\r\n".join(lines) + "\r\n"


def to_vcard_many(contacts: Iterable[ParsedContact]) -> str:
    """Serialize several contacts into one vCard file."""
    return "".join(to_vcard(c) for c in contacts)


def _join(values: Iterable[str]) -> str:
    return "; ".join(values)


# CSV column key -> (header, value getter)
CSV_FIELDS: dict[str, tuple[str, Callable[[ParsedContact], str]]] = {
    "full_name": ("Full Name", lambda c: c.full_name),
    "given_name": ("First Name", lambda c: c.given_name or ""),
    "family_name": ("Last Name", lambda c: c.family_name or ""),
    "job_title": ("Job Title", lambda c: c.job_title or ""),
    "organization": ("Company", lambda c: c.organization_name or ""),
    "department": ("Department", lambda c: c.department or ""),
    "email": ("Email", lambda c: _join(e.address for e in c.email_addresses)),
    "phone": ("Phone Number", lambda c: _join(p.formatted_number for p in c.phone_numbers)),
    "website": ("Website", lambda c: _join(u.url for u in c.urls)),
    "social": (
        "Social Profiles",
        lambda c: _join(f"{s.service}: {s.username}" for s in c.social_profiles),
    ),
    "address": ("Address", lambda c: _join(format_address(a) for a in c.postal_addresses)),
    "note": ("Notes", lambda c: c.note or ""),
    "confidence": ("Confidence", lambda c: f"{c.confidence_scores.overall:.2f}"),
    "valid_for_saving": ("Valid", lambda c: "Yes" if c.is_valid_for_saving else "No"),
}

DEFAULT_FIELDS = (
    "full_name",
    "job_title",
    "organization",
    "email",
    "phone",
    "website",
    "address",
)


def to_csv(
    contacts: Iterable[ParsedContact],
    fields: Sequence[str] = DEFAULT_FIELDS,
) -> str:
    """
    Serialize contacts as CSV with a header row.

    Every value is formula-sanitized before the csv module quotes it.

    Args:
        contacts: Contacts to write, one row each.
        fields: Column keys from CSV_FIELDS, in output order.

    Returns:
        CSV text.

    Raises:
        ValueError: If a field key is unknown.
    """
    unknown = [f for f in fields if f not in CSV_FIELDS]
    if unknown:
        raise ValueError(f"Unknown CSV field(s): {', '.join(unknown)}")

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([sanitize_csv_value(CSV_FIELDS[f][0]) for f in fields])
    for contact in contacts:
        writer.writerow([sanitize_csv_value(CSV_FIELDS[f][1](contact)) for f in fields])
    return output.getvalue()


def export_filename(contact: ParsedContact, fmt: str) -> str:
    """Build a file name like ``Jane Doe.vcf`` for a contact."""
    name = contact.full_name or "Unknown"
    extension = "vcf" if fmt == "vcard" else fmt
    return f"{_INVALID_FILENAME_CHARS.sub('-', name)}.{extension}"
