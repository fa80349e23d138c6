from __future__ import annotations

import re
import unicodedata
from typing import Optional, Tuple

import tldextract

from config.industries import LINKEDIN_PROFILE_MARKER


# Offline suffix list; never fetch the public suffix list at request time
_EXTRACT = tldextract.TLDExtract(suffix_list_urls=())


def is_linkedin_profile_url(url: Optional[str]) -> bool:
    if not url or not isinstance(url, str):
        return False
    return LINKEDIN_PROFILE_MARKER in url.lower()


def extract_apex_domain(url_or_domain: Optional[str]) -> Optional[str]:
    if not url_or_domain:
        return None
    text = str(url_or_domain).strip().lower()
    if not text:
        return None
    if not text.startswith('http://') and not text.startswith('https://'):
        text = f"http://{text}"
    ext = _EXTRACT(text)
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return None


def split_name(full_name: Optional[str]) -> Tuple[str, str]:
    """Split on the first space: first token is the first name, the rest the last name."""
    if not full_name:
        return "", ""
    text = str(full_name).strip()
    if " " not in text:
        return text, ""
    first, rest = text.split(" ", 1)
    return first, rest.strip()


def email_local_part(value: Optional[str]) -> str:
    """ASCII-fold and strip a name fragment so it can be used in an e-mail address."""
    if not value:
        return ""
    folded = unicodedata.normalize('NFKD', str(value)).encode('ascii', 'ignore').decode('ascii')
    return re.sub(r'[^a-z0-9]', '', folded.lower())


def company_slug(company: Optional[str]) -> str:
    return email_local_part(company)
