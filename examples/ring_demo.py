from slothash.consistent import ConsistentHashing
from slothash.ring import NOT_PLACED
from slothash.store import NodeStatus


def demo():
    """Register three servers on a 16-slot ring and route some keys."""
    ch: ConsistentHashing[str] = ConsistentHashing(16)
    for server in ("10.0.0.1:6388", "10.0.0.2:6388", "10.0.0.3:6388"):
        slot = ch.add_server_entry_point(server)
        print(f"server={server} slot={slot} status={NodeStatus.WORKING.message}")

    for key in ("job-a", "job-b", "job-c", "user-42"):
        print(f"key={key} -> {ch.find_server_map(key)}")


def demo_full_ring():
    """A ring with fewer slots than servers refuses the overflow."""
    ch: ConsistentHashing[str] = ConsistentHashing(2)
    for server in ("s1", "s2", "s3"):
        slot = ch.add_server_entry_point(server)
        print(f"server={server} " + ("not placed" if slot == NOT_PLACED else f"slot={slot}"))
    print(f"snapshot={ch.ring.get_snapshot()}")


if __name__ == "__main__":
    demo()
    demo_full_ring()
