import threading

from hanson import (
    CustomBindable,
    EventPublisher,
    KeyValueObserving,
    NotificationCenter,
    Observable,
    ObservableAttribute,
    ObservationManager,
    ThreadAffinityScheduler,
)

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Publishing events")
print("-" * 100)
print()


# Any class can publish events by deriving from EventPublisher.
class Clicks(EventPublisher[str]):
    pass


clicks = Clicks()
token = clicks.add_event_handler(lambda button: print(f"Clicked: {button}"))
clicks.publish("OK")  # This will call the handler

clicks.remove_event_handler(token)
clicks.publish("Cancel")  # This will not call the handler anymore

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Observing values")
print("-" * 100)
print()

# An Observable publishes the old and the new value on every write.
current_name = Observable("Alice")
current_name.add_event_handler(
    lambda change: print(f"Name changed from {change.old_value} to {change.new_value}")
)

current_name.value = "Bob"
current_name.set("Charlie")

# Silent updates change the value without telling anyone.
current_name.silently_update("Dave")
print(f"Name is now {current_name.value}")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Binding values")
print("-" * 100)
print()


class Label:
    def set_text(self, text):
        print(f"Label shows: {text}")


manager = ObservationManager()
mirror = Observable("")

# The mirror follows current_name, but writing the mirror never writes back.
manager.bind(current_name, mirror)
current_name.value = "Eve"
print(f"Mirror is {mirror.value}")

# Write-only targets are bound through a setter.
label = Label()
manager.bind(current_name, CustomBindable(label, Label.set_text))
current_name.value = "Frank"

# Removing every observation breaks every binding at once.
manager.unobserve_all()
current_name.value = "Grace"
print(f"Mirror is still {mirror.value}")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Observable attributes")
print("-" * 100)
print()


class Profile:
    name = ObservableAttribute("Alice")
    age = ObservableAttribute(30)


profile = Profile()
Profile.age.of(profile).add_event_handler(lambda change: print(f"Age is now {change.new_value}"))
profile.age = 31

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Observing plain attributes")
print("-" * 100)
print()


class Player(KeyValueObserving):
    def __init__(self, score):
        self.score = score


player = Player(0)
score = player.dynamic_property("score", int)
score.add_event_handler(lambda change: print(f"Score: {change.old_value} -> {change.new_value}"))
player.score = 10

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Notifications")
print("-" * 100)
print()

center = NotificationCenter.default()
logins = center.observable("user.login")
logins.add_event_handler(lambda note: print(f"Logged in: {note.user_info['name']}"))
center.post("user.login", name="Alice")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Delivering on a designated thread")
print("-" * 100)
print()

scheduler = ThreadAffinityScheduler()
progress = Observable(0)
progress.add_event_handler(
    lambda change: print(f"Progress {change.new_value}% on {threading.current_thread().name}"),
    scheduler,
)


def work():
    for percent in (25, 50, 75, 100):
        progress.value = percent


worker = threading.Thread(target=work, name="worker")
worker.start()
worker.join()

# Nothing has been printed yet; the updates are waiting for this thread.
scheduler.run_pending()
