from __future__ import annotations

from _infra import banner, setup_logging

from efx import (
    Condition,
    context,
    error,
    flow,
    invoke_restart,
    pure,
    request,
    run,
    signal,
)
from kungfu import Error, Ok

USERS = {1: "alice", 2: "bob"}


def fetch_user(user_id: int):
    # Locality: the lookup signals instead of failing; callers decide the policy.
    if user_id in USERS:
        return pure(USERS[user_id])
    return error("user not found", {"id": user_id})


def choose_restart(condition: Condition):
    if condition.get("id", 0) < 0:
        return invoke_restart("abort")
    return invoke_restart("use-guest", condition["id"])


def main() -> None:
    setup_logging()
    banner("01_quickstart: request + handle + restarts")

    env = context(fetch=fetch_user)

    for user_id in (1, 7):
        name = (
            flow(request("fetch", user_id))
            .map(lambda user: f"hello, {user}")
            .handle("error", choose_restart)
            .with_restart("use-guest", lambda uid: pure(f"guest #{uid}"))
            .with_restart("abort", lambda _: pure("aborted"))
            .provide(env)
            .run()
        )
        print(name)

    banner("unhandled conditions resume with None")
    print(run(signal({"type": "audit", "event": "login"})))

    banner("catch turns errors into kungfu.Result")
    match flow(request("fetch", 99)).catch().provide(env).run():
        case Ok(user):
            print(f"ok: {user}")
        case Error(condition):
            print(f"error: {condition.message} (id={condition['id']})")


if __name__ == "__main__":
    main()
