# Indices / enums used across modules (keep ints for JIT friendliness)

# operator kinds exposed by a problem domain
MUTATION      = 0
RUIN_RECREATE = 1
LOCAL_SEARCH  = 2

# solution slots (memory locations inside the problem domain)
SLOT_CURRENT  = 0
SLOT_PROPOSED = 1
N_SLOTS       = 2

# iteration outcome labels written to the trace
STATUS_REJECT  = "REJECT"
STATUS_ACCEPT  = "ACCEPT"
STATUS_IMPROVE = "IMPROVE"
STATUS_BEST    = "BEST"
STATUS_SAME    = "SAME" # candidate equal to the incumbent, acceptance skipped
