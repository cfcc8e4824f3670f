app_name = "persian_date_picker"
app_title = "Persian Date Picker"
app_publisher = "Persian Date Picker Contributors"
app_description = "Jalali calendar conversion engine and headless date picker state for Frappe sites."
app_email = "support@example.com"
app_license = "MIT"

# Boot
boot_session = "persian_date_picker.boot.boot_session"

# Whitelisted methods
override_whitelisted_methods = {
    "persian_date_picker.get_preference": "persian_date_picker.api.preferences.get_preference_context",
    "persian_date_picker.set_preference": "persian_date_picker.api.preferences.set_display_preference",
}
