"""
Records passed between the steps of one invocation
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class BlobTrigger:
    """The uploaded object as reported by the storage event"""
    bucket: str
    key: str
    size: int
    invocation_id: str
    metadata: Dict[str, str] = field(default_factory=dict)
    # Raw event record, only used for diagnostics
    binding_data: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeliveryResult:
    """A response the RDP API confirmed as successful"""
    status_code: int
    body: str
    response_status: Optional[str] = None
