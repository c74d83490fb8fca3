"""
Deployment Models
Transient records produced by a deploy invocation
"""

from typing import Dict, Optional


class DeploymentResult:
    """
    Outcome of a single deploy invocation

    Populated from the deploy tool's result file. Fields are None when the
    file lacks the corresponding path.
    """

    def __init__(
        self,
        contract_address: Optional[str],
        transaction_hash: Optional[str]
    ):
        self.contract_address = contract_address
        self.transaction_hash = transaction_hash

    def is_complete(self) -> bool:
        """Both fields present and non-empty"""
        return bool(self.contract_address) and bool(self.transaction_hash)

    def to_dict(self) -> Dict:
        return {
            'contract_address': self.contract_address,
            'transaction_hash': self.transaction_hash
        }

    def __eq__(self, other):
        if not isinstance(other, DeploymentResult):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (
            f"DeploymentResult(contract_address={self.contract_address!r}, "
            f"transaction_hash={self.transaction_hash!r})"
        )
