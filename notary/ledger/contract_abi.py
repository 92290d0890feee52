"""ABI of the AssignmentHashing contract (only the members the notary uses)."""

ASSIGNMENT_HASHING_ABI: list[dict[str, object]] = [
    {
        "inputs": [
            {"internalType": "string", "name": "_assignmentId", "type": "string"},
            {"internalType": "string", "name": "_fileHash", "type": "string"},
        ],
        "name": "submitAssignment",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "_student", "type": "address"},
            {"internalType": "string", "name": "_assignmentId", "type": "string"},
        ],
        "name": "getSubmission",
        "outputs": [
            {"internalType": "string", "name": "", "type": "string"},
            {"internalType": "uint256", "name": "", "type": "uint256"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "student", "type": "address"},
            {"indexed": False, "internalType": "string", "name": "assignmentId", "type": "string"},
            {"indexed": False, "internalType": "string", "name": "fileHash", "type": "string"},
            {"indexed": False, "internalType": "uint256", "name": "timestamp", "type": "uint256"},
        ],
        "name": "AssignmentSubmitted",
        "type": "event",
    },
]
