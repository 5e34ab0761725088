# museumdesk

A small library for keeping the records of a museum front desk. It models:

- **exhibits** (`museumdesk.exhibit`): `Exhibit`, plus `ArtExhibit` (with an artist), `HistoryExhibit` (with an era) and `TechExhibit` (with a technology). Each has a title, description, popularity and rating. `popularity_status()` reports "Highly Popular" from 75, "Moderately Popular" from 50, "Somewhat Popular" from 25 and "Not Popular" below that. `exhibit_from_dict()` picks the right kind of exhibit from a stored mapping.
- **a collection** (`museumdesk.collection.MuseumCollection`): an ordered, zero-indexed list of exhibits with a text listing.
- **guides** (`museumdesk.guide.Guide`), who have a name and a tour language and announce tours with `start_tour()`.
- **the schedule** (`museumdesk.schedule.Schedule`): open weekdays (Sunday first), opening and closing times, and up to ten holidays. Adding an eleventh holiday raises `HolidayLimitError`. `is_open_on()` takes a weekday name or a holiday string; holidays and unknown names count as closed.
- **tickets** (`museumdesk.ticket.Ticket`) linked to an exhibit, and `is_ticket_of_user()`.
- **memberships** (`museumdesk.membership.Membership`); `discount_for("vip")` gives 30, `discount_for("local")` 10 and any other type 0.
- **reviews** (`museumdesk.review.Review`).
- **users** (`museumdesk.user.User`) holding tickets, memberships and reviews, with text reports of each and `has_vip_pass()`.
- **notifications** (`museumdesk.notification`): `send_alert()` and `notify_all()` return the notification text, with an extra line for holders of a VIP ticket.
- **the museum** (`museumdesk.museum.Museum`): its name, schedule, exhibits and guides.

## Storage

`Museum.save()` / `Museum.load()` and `User.save()` / `User.load()` write and read JSON files indented by four spaces. `load_user(name, directory)` reads `<name>.json` from a directory and fills in the name when the stored one is empty. Loading a missing file raises `FileNotFoundError`; an empty or malformed file raises `ValueError`. A museum saved without a name is stored as "Unknown Museum".

## Installing

```
pip install .
```

## Example

```python
from museumdesk.exhibit import ArtExhibit
from museumdesk.museum import Museum
from museumdesk.schedule import Schedule

museum = Museum(name="National Museum")
museum.add_exhibit(
    ArtExhibit(title="Water Lilies", description="Oil on canvas",
               popularity=80, rating=4.5, artist="Monet")
)

schedule = Schedule()
schedule.set_open_days([False, True, True, True, True, True, False])
schedule.set_timings("09:00 AM", "05:00 PM")
schedule.add_holiday("2025-12-25")
museum.schedule = schedule

print(museum.is_open_today("Monday"))      # True
print(schedule.is_open_on("2025-12-25"))   # False
museum.save("museum.json")

again = Museum.load("museum.json")
print(again.exhibit(0).artist)             # Monet
```

## What it does not do

The package is a library only. It installs no command and has no interactive menu: logging in, buying tickets, adding reviews or memberships and administering the museum are done by calling the classes above from your own code. There is no administrator account or login check. The text methods (`describe()`, the user reports, the notification functions) return strings and print nothing.

## Running the tests

```
pip install .[test]
pytest
```