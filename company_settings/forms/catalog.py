"""Built-in settings schemas and the default company settings document."""

from __future__ import annotations

import copy
from typing import Any

from company_settings.forms.fields import SettingsSchema


COMPANY_SCHEMA_ID = 'company-settings'
PERSONAL_SCHEMA_ID = 'personal-settings'

WEBSITE_PATTERN = r'^(https?:\/\/)?([\da-z\.-]+)\.([a-z\.]{2,6})([\/\w \.-]*)*\/?$'
LOGO_MAX_SIZE = 5 * 1024 * 1024


def _options(*pairs: tuple[str, Any]) -> list[dict[str, Any]]:
    return [{'label': label, 'value': value} for label, value in pairs]


def _when(field_id: str, value: Any = True, operator: str = 'equals') -> dict[str, Any]:
    return {'field': field_id, 'value': value, 'operator': operator}


LANGUAGE_OPTIONS = _options(
    ('English', 'en'),
    ('Spanish', 'es'),
    ('French', 'fr'),
    ('German', 'de'),
    ('Japanese', 'ja'),
    ('Chinese', 'zh'),
)
TIMEZONE_OPTIONS = _options(
    ('UTC', 'UTC'),
    ('Eastern Time (ET)', 'America/New_York'),
    ('Central Time (CT)', 'America/Chicago'),
    ('Mountain Time (MT)', 'America/Denver'),
    ('Pacific Time (PT)', 'America/Los_Angeles'),
    ('London (GMT)', 'Europe/London'),
    ('Paris (CET)', 'Europe/Paris'),
    ('Tokyo (JST)', 'Asia/Tokyo'),
)
THEME_OPTIONS = _options(('Light', 'light'), ('Dark', 'dark'), ('System', 'system'))
DATE_FORMAT_OPTIONS = _options(('MM/DD/YYYY', 'MM/DD/YYYY'), ('DD/MM/YYYY', 'DD/MM/YYYY'), ('YYYY-MM-DD', 'YYYY-MM-DD'))
TIME_FORMAT_OPTIONS = _options(('12-hour (AM/PM)', '12hour'), ('24-hour', '24hour'))
INDUSTRY_OPTIONS = _options(
    ('Technology', 'technology'),
    ('Finance', 'finance'),
    ('Healthcare', 'healthcare'),
    ('Education', 'education'),
    ('Retail', 'retail'),
    ('Manufacturing', 'manufacturing'),
    ('Other', 'other'),
)
COMPANY_SIZE_OPTIONS = _options(
    ('1-10 employees', '1-10'),
    ('11-50 employees', '11-50'),
    ('51-200 employees', '51-200'),
    ('201-500 employees', '201-500'),
    ('501-1000 employees', '501-1000'),
    ('1001+ employees', '1001+'),
)
SECURITY_LEVEL_OPTIONS = _options(
    ('Low - Basic security measures', 'low'),
    ('Medium - Standard security (recommended)', 'medium'),
    ('High - Maximum security with additional verification', 'high'),
)
DATA_RETENTION_OPTIONS = _options(
    ('30 Days', '30days'),
    ('90 Days', '90days'),
    ('1 Year', '1year'),
    ('2 Years', '2years'),
    ('Forever', 'forever'),
)
BACKUP_FREQUENCY_OPTIONS = _options(('Daily', 'daily'), ('Weekly', 'weekly'), ('Monthly', 'monthly'))
EMAIL_DIGEST_OPTIONS = _options(('Never', 'never'), ('Daily', 'daily'), ('Weekly', 'weekly'), ('Monthly', 'monthly'))
CRM_PROVIDER_OPTIONS = _options(
    ('None', 'none'),
    ('Salesforce', 'salesforce'),
    ('HubSpot', 'hubspot'),
    ('Zoho', 'zoho'),
    ('Other', 'other'),
)

NOTIFICATIONS_ON = _when('notifications.enableNotifications')


DEFAULT_COMPANY_SETTINGS: dict[str, Any] = {
    'profile': {
        'name': 'Acme Corporation',
        'description': 'Leading provider of innovative solutions',
        'logo': '',
        'industry': 'technology',
        'foundedYear': '2010',
        'website': 'https://example.com',
        'companySize': '11-50',
        'primaryColor': '#000000',
        'secondaryColor': '#ffffff',
    },
    'notifications': {
        'enableNotifications': False,
        'emailDigestFrequency': 'weekly',
        'notifyOnUserSignup': True,
        'notifyOnPaymentReceived': True,
        'notifyOnSystemUpdates': True,
        'notifyOnSecurityAlerts': True,
        'marketingEmails': False,
    },
    'security': {
        'enableTwoFactorAuth': False,
        'passwordExpiryDays': 90,
        'sessionTimeoutMinutes': 60,
        'ipRestriction': False,
        'allowedIpAddresses': '',
        'failedLoginAttempts': 5,
        'securityLevel': 'medium',
    },
    'data': {
        'enableDataSharing': False,
        'enableAnalytics': True,
        'enableAutoBackup': False,
        'dataRetentionPeriod': '1year',
        'backupFrequency': 'daily',
        'backupTime': '00:00',
        'encryptData': True,
        'anonymizeUserData': False,
    },
    'integrations': {
        'enableSlackIntegration': False,
        'slackWebhookUrl': '',
        'enableGoogleAnalytics': False,
        'googleAnalyticsId': '',
        'enableZapier': False,
        'enableCRM': False,
        'crmProvider': 'none',
        'crmApiKey': '',
        'enableSocialLogin': False,
        'enabledSocialProviders': {
            'google': False,
            'facebook': False,
            'twitter': False,
            'github': False,
        },
    },
    'display': {
        'defaultTheme': 'system',
        'enableCustomBranding': False,
        'dateFormat': 'MM/DD/YYYY',
        'timeFormat': '12hour',
        'defaultLanguage': 'en',
        'defaultTimezone': 'UTC',
        'showWelcomeMessage': True,
        'compactMode': False,
    },
}


def default_company_settings() -> dict[str, Any]:
    return copy.deepcopy(DEFAULT_COMPANY_SETTINGS)


_PROFILE_TAB = {
    'id': 'profile',
    'title': 'Profile',
    'icon': 'building',
    'sections': [
        {
            'id': 'company-info',
            'title': 'Company Information',
            'description': 'Basic information about your company',
            'fields': [
                {
                    'id': 'profile.name',
                    'type': 'text',
                    'label': 'Company Name',
                    'description': "This is your company's official name.",
                    'placeholder': 'Acme Inc.',
                    'defaultValue': 'Acme Corporation',
                    'required': True,
                    'validation': {'minLength': 2},
                },
                {
                    'id': 'profile.description',
                    'type': 'textarea',
                    'label': 'Company Description',
                    'description': 'A brief description of your company and what you do.',
                    'placeholder': 'Tell us about your company...',
                    'defaultValue': 'Leading provider of innovative solutions',
                },
                {
                    'id': 'profile.logo',
                    'type': 'file',
                    'label': 'Company Logo',
                    'description': 'Upload a square logo in PNG or JPG format, ideally 512x512px.',
                    'accept': 'image/*',
                    'maxSize': LOGO_MAX_SIZE,
                },
            ],
        },
        {
            'id': 'company-details',
            'title': 'Company Details',
            'fields': [
                {
                    'id': 'profile.industry',
                    'type': 'select',
                    'label': 'Industry',
                    'description': 'Select the industry your company operates in.',
                    'options': INDUSTRY_OPTIONS,
                    'defaultValue': 'technology',
                },
                {
                    'id': 'profile.foundedYear',
                    'type': 'text',
                    'label': 'Founded Year',
                    'description': 'The year your company was founded.',
                    'placeholder': '2010',
                    'defaultValue': '2010',
                },
                {
                    'id': 'profile.website',
                    'type': 'text',
                    'label': 'Website',
                    'description': "Your company's website URL.",
                    'placeholder': 'https://example.com',
                    'defaultValue': 'https://example.com',
                    'validation': {'pattern': WEBSITE_PATTERN},
                },
                {
                    'id': 'profile.companySize',
                    'type': 'select',
                    'label': 'Company Size',
                    'description': 'The approximate number of employees.',
                    'options': COMPANY_SIZE_OPTIONS,
                    'defaultValue': '11-50',
                },
            ],
        },
        {
            'id': 'brand-colors',
            'title': 'Brand Colors',
            'fields': [
                {
                    'id': 'profile.primaryColor',
                    'type': 'color',
                    'label': 'Primary Color',
                    'description': "Your brand's primary color (hex code).",
                    'defaultValue': '#000000',
                },
                {
                    'id': 'profile.secondaryColor',
                    'type': 'color',
                    'label': 'Secondary Color',
                    'description': "Your brand's secondary color (hex code).",
                    'defaultValue': '#ffffff',
                },
            ],
        },
    ],
}

_NOTIFICATIONS_TAB = {
    'id': 'notifications',
    'title': 'Notifications',
    'icon': 'bell',
    'sections': [
        {
            'id': 'notification-settings',
            'title': 'Notification Settings',
            'description': 'Configure how and when you receive notifications',
            'fields': [
                {
                    'id': 'notifications.enableNotifications',
                    'type': 'switch',
                    'label': 'Email Notifications',
                    'description': 'Enable or disable all email notifications.',
                    'defaultValue': False,
                },
                {
                    'id': 'notifications.emailDigestFrequency',
                    'type': 'select',
                    'label': 'Email Digest Frequency',
                    'description': 'How often you want to receive email digests.',
                    'options': EMAIL_DIGEST_OPTIONS,
                    'defaultValue': 'weekly',
                    'dependsOn': NOTIFICATIONS_ON,
                },
            ],
        },
        {
            'id': 'notification-types',
            'title': 'Notification Types',
            'description': 'Select which types of notifications you want to receive',
            'fields': [
                {
                    'id': 'notifications.notifyOnUserSignup',
                    'type': 'checkbox',
                    'label': 'User Signup Notifications',
                    'description': 'Receive notifications when new users sign up.',
                    'defaultValue': True,
                    'dependsOn': NOTIFICATIONS_ON,
                },
                {
                    'id': 'notifications.notifyOnPaymentReceived',
                    'type': 'checkbox',
                    'label': 'Payment Notifications',
                    'description': 'Receive notifications when payments are processed.',
                    'defaultValue': True,
                    'dependsOn': NOTIFICATIONS_ON,
                },
                {
                    'id': 'notifications.notifyOnSystemUpdates',
                    'type': 'checkbox',
                    'label': 'System Update Notifications',
                    'description': 'Receive notifications about system updates and maintenance.',
                    'defaultValue': True,
                    'dependsOn': NOTIFICATIONS_ON,
                },
                {
                    'id': 'notifications.notifyOnSecurityAlerts',
                    'type': 'checkbox',
                    'label': 'Security Alert Notifications',
                    'description': 'Receive notifications about security-related events.',
                    'defaultValue': True,
                    'dependsOn': NOTIFICATIONS_ON,
                },
                {
                    'id': 'notifications.marketingEmails',
                    'type': 'switch',
                    'label': 'Marketing Emails',
                    'description': 'Receive promotional emails and product updates.',
                    'defaultValue': False,
                },
            ],
        },
    ],
}

_SECURITY_TAB = {
    'id': 'security',
    'title': 'Security',
    'icon': 'shield',
    'sections': [
        {
            'id': 'authentication',
            'title': 'Authentication',
            'description': 'Control how members of your company sign in',
            'fields': [
                {
                    'id': 'security.enableTwoFactorAuth',
                    'type': 'switch',
                    'label': 'Two-Factor Authentication',
                    'description': 'Require two-factor authentication for all users.',
                    'defaultValue': False,
                },
                {
                    'id': 'security.securityLevel',
                    'type': 'radio',
                    'label': 'Security Level',
                    'description': 'Choose the overall security posture for your company.',
                    'options': SECURITY_LEVEL_OPTIONS,
                    'defaultValue': 'medium',
                },
                {
                    'id': 'security.passwordExpiryDays',
                    'type': 'number',
                    'label': 'Password Expiry (days)',
                    'description': 'Number of days before passwords expire. Set to 0 to never expire.',
                    'defaultValue': 90,
                    'min': 0,
                    'max': 365,
                },
                {
                    'id': 'security.sessionTimeoutMinutes',
                    'type': 'number',
                    'label': 'Session Timeout (minutes)',
                    'description': 'Minutes of inactivity before a user is signed out.',
                    'defaultValue': 60,
                    'min': 5,
                    'max': 1440,
                },
                {
                    'id': 'security.failedLoginAttempts',
                    'type': 'number',
                    'label': 'Failed Login Attempts',
                    'description': 'Number of failed attempts before an account is locked.',
                    'defaultValue': 5,
                    'min': 1,
                    'max': 10,
                },
            ],
        },
        {
            'id': 'access-control',
            'title': 'Access Control',
            'fields': [
                {
                    'id': 'security.ipRestriction',
                    'type': 'switch',
                    'label': 'IP Restriction',
                    'description': 'Restrict access to specific IP addresses.',
                    'defaultValue': False,
                },
                {
                    'id': 'security.allowedIpAddresses',
                    'type': 'textarea',
                    'label': 'Allowed IP Addresses',
                    'description': 'Enter one IP address or CIDR range per line.',
                    'placeholder': '192.168.1.1\n10.0.0.0/24',
                    'defaultValue': '',
                    'required': True,
                    'dependsOn': _when('security.ipRestriction'),
                },
            ],
        },
    ],
}

_DATA_TAB = {
    'id': 'data',
    'title': 'Data',
    'icon': 'database',
    'sections': [
        {
            'id': 'data-privacy',
            'title': 'Data & Privacy',
            'fields': [
                {
                    'id': 'data.enableDataSharing',
                    'type': 'switch',
                    'label': 'Data Sharing',
                    'description': 'Share anonymized usage data to help improve the product.',
                    'defaultValue': False,
                },
                {
                    'id': 'data.enableAnalytics',
                    'type': 'switch',
                    'label': 'Analytics',
                    'description': 'Collect analytics about how your company uses the application.',
                    'defaultValue': True,
                },
                {
                    'id': 'data.dataRetentionPeriod',
                    'type': 'select',
                    'label': 'Data Retention Period',
                    'description': 'How long data is kept before it is deleted.',
                    'options': DATA_RETENTION_OPTIONS,
                    'defaultValue': '1year',
                },
                {
                    'id': 'data.encryptData',
                    'type': 'switch',
                    'label': 'Encrypt Data',
                    'description': 'Encrypt stored data at rest.',
                    'defaultValue': True,
                },
                {
                    'id': 'data.anonymizeUserData',
                    'type': 'switch',
                    'label': 'Anonymize User Data',
                    'description': 'Strip personal information from exported data.',
                    'defaultValue': False,
                },
            ],
        },
        {
            'id': 'backups',
            'title': 'Backups',
            'fields': [
                {
                    'id': 'data.enableAutoBackup',
                    'type': 'switch',
                    'label': 'Automatic Backups',
                    'description': 'Back up your data on a schedule.',
                    'defaultValue': False,
                },
                {
                    'id': 'data.backupFrequency',
                    'type': 'select',
                    'label': 'Backup Frequency',
                    'options': BACKUP_FREQUENCY_OPTIONS,
                    'defaultValue': 'daily',
                    'dependsOn': _when('data.enableAutoBackup'),
                },
                {
                    'id': 'data.backupTime',
                    'type': 'time',
                    'label': 'Backup Time',
                    'description': 'Time of day the backup runs (UTC).',
                    'defaultValue': '00:00',
                    'dependsOn': _when('data.enableAutoBackup'),
                },
            ],
        },
    ],
}

_INTEGRATIONS_TAB = {
    'id': 'integrations',
    'title': 'Integrations',
    'icon': 'plug',
    'sections': [
        {
            'id': 'slack',
            'title': 'Slack',
            'fields': [
                {
                    'id': 'integrations.enableSlackIntegration',
                    'type': 'switch',
                    'label': 'Slack Integration',
                    'description': 'Send notifications to a Slack workspace.',
                    'defaultValue': False,
                },
                {
                    'id': 'integrations.slackWebhookUrl',
                    'type': 'text',
                    'label': 'Slack Webhook URL',
                    'placeholder': 'https://hooks.slack.com/services/...',
                    'defaultValue': '',
                    'required': True,
                    'dependsOn': _when('integrations.enableSlackIntegration'),
                },
            ],
        },
        {
            'id': 'analytics',
            'title': 'Analytics',
            'fields': [
                {
                    'id': 'integrations.enableGoogleAnalytics',
                    'type': 'switch',
                    'label': 'Google Analytics',
                    'description': 'Track usage with Google Analytics.',
                    'defaultValue': False,
                },
                {
                    'id': 'integrations.googleAnalyticsId',
                    'type': 'text',
                    'label': 'Google Analytics ID',
                    'placeholder': 'G-XXXXXXXXXX',
                    'defaultValue': '',
                    'required': True,
                    'dependsOn': _when('integrations.enableGoogleAnalytics'),
                },
            ],
        },
        {
            'id': 'crm',
            'title': 'CRM',
            'fields': [
                {
                    'id': 'integrations.enableCRM',
                    'type': 'switch',
                    'label': 'CRM Integration',
                    'description': 'Sync customers with your CRM.',
                    'defaultValue': False,
                },
                {
                    'id': 'integrations.crmProvider',
                    'type': 'select',
                    'label': 'CRM Provider',
                    'options': CRM_PROVIDER_OPTIONS,
                    'defaultValue': 'none',
                    'dependsOn': _when('integrations.enableCRM'),
                },
                {
                    'id': 'integrations.crmApiKey',
                    'type': 'password',
                    'label': 'CRM API Key',
                    'defaultValue': '',
                    'required': True,
                    'dependsOn': _when('integrations.crmProvider', 'none', 'notEquals'),
                },
            ],
        },
        {
            'id': 'social-login',
            'title': 'Social Login',
            'fields': [
                {
                    'id': 'integrations.enableSocialLogin',
                    'type': 'switch',
                    'label': 'Social Login',
                    'description': 'Allow users to sign in with social accounts.',
                    'defaultValue': False,
                },
                *[
                    {
                        'id': f'integrations.enabledSocialProviders.{provider}',
                        'type': 'checkbox',
                        'label': label,
                        'defaultValue': False,
                        'dependsOn': _when('integrations.enableSocialLogin'),
                    }
                    for provider, label in (
                        ('google', 'Google'),
                        ('facebook', 'Facebook'),
                        ('twitter', 'Twitter'),
                        ('github', 'GitHub'),
                    )
                ],
            ],
        },
        {
            'id': 'zapier',
            'title': 'Zapier',
            'fields': [
                {
                    'id': 'integrations.enableZapier',
                    'type': 'switch',
                    'label': 'Zapier',
                    'description': 'Connect to thousands of apps through Zapier.',
                    'defaultValue': False,
                },
            ],
        },
    ],
}

_DISPLAY_TAB = {
    'id': 'display',
    'title': 'Display',
    'icon': 'monitor',
    'sections': [
        {
            'id': 'display-settings',
            'title': 'Display Settings',
            'description': 'Customize the appearance and behavior of your interface',
            'fields': [
                {
                    'id': 'display.defaultTheme',
                    'type': 'select',
                    'label': 'Default Theme',
                    'description': 'Choose the default theme for your interface.',
                    'options': THEME_OPTIONS,
                    'defaultValue': 'system',
                },
                {
                    'id': 'display.enableCustomBranding',
                    'type': 'switch',
                    'label': 'Custom Branding',
                    'description': "Apply your company's branding to the interface.",
                    'defaultValue': False,
                },
                {
                    'id': 'display.dateFormat',
                    'type': 'select',
                    'label': 'Date Format',
                    'description': 'Choose how dates are displayed.',
                    'options': DATE_FORMAT_OPTIONS,
                    'defaultValue': 'MM/DD/YYYY',
                },
                {
                    'id': 'display.timeFormat',
                    'type': 'select',
                    'label': 'Time Format',
                    'description': 'Choose how times are displayed.',
                    'options': TIME_FORMAT_OPTIONS,
                    'defaultValue': '12hour',
                },
                {
                    'id': 'display.defaultLanguage',
                    'type': 'select',
                    'label': 'Default Language',
                    'description': 'Choose the default language.',
                    'options': LANGUAGE_OPTIONS,
                    'defaultValue': 'en',
                },
                {
                    'id': 'display.defaultTimezone',
                    'type': 'select',
                    'label': 'Default Timezone',
                    'description': 'Choose the default timezone.',
                    'options': TIMEZONE_OPTIONS,
                    'defaultValue': 'UTC',
                },
                {
                    'id': 'display.showWelcomeMessage',
                    'type': 'switch',
                    'label': 'Welcome Message',
                    'description': 'Show welcome message for new users.',
                    'defaultValue': True,
                },
                {
                    'id': 'display.compactMode',
                    'type': 'switch',
                    'label': 'Compact Mode',
                    'description': 'Use a more compact UI with less whitespace.',
                    'defaultValue': False,
                },
            ],
        },
    ],
}

COMPANY_SETTINGS_SCHEMA = SettingsSchema.model_validate(
    {
        'id': COMPANY_SCHEMA_ID,
        'title': 'Company Settings',
        'description': 'Manage your company profile and configuration settings',
        'tabs': [_PROFILE_TAB, _NOTIFICATIONS_TAB, _SECURITY_TAB, _DATA_TAB, _INTEGRATIONS_TAB, _DISPLAY_TAB],
    }
)


PREFERENCES_NOTIFICATIONS_ON = _when('preferences.notifications.enabled')

PERSONAL_SETTINGS_SCHEMA = SettingsSchema.model_validate(
    {
        'id': PERSONAL_SCHEMA_ID,
        'title': 'Personal Settings',
        'description': 'Manage your personal preferences and account settings',
        'sections': [
            {
                'id': 'appearance',
                'title': 'Appearance',
                'description': 'Customize how the application looks',
                'fields': [
                    {
                        'id': 'preferences.theme',
                        'type': 'select',
                        'label': 'Theme',
                        'description': 'Choose your preferred theme.',
                        'options': THEME_OPTIONS,
                        'defaultValue': 'system',
                    },
                    {
                        'id': 'preferences.fontSize',
                        'type': 'select',
                        'label': 'Font Size',
                        'description': 'Adjust the text size throughout the application.',
                        'options': _options(('Small', 'small'), ('Medium', 'medium'), ('Large', 'large')),
                        'defaultValue': 'medium',
                    },
                    {
                        'id': 'preferences.highContrast',
                        'type': 'switch',
                        'label': 'High Contrast Mode',
                        'description': 'Increase contrast for better visibility.',
                        'defaultValue': False,
                    },
                    {
                        'id': 'preferences.reducedMotion',
                        'type': 'switch',
                        'label': 'Reduced Motion',
                        'description': 'Minimize animations throughout the interface.',
                        'defaultValue': False,
                    },
                ],
            },
            {
                'id': 'localization',
                'title': 'Localization',
                'description': 'Set your language and regional preferences',
                'fields': [
                    {
                        'id': 'preferences.language',
                        'type': 'select',
                        'label': 'Language',
                        'options': LANGUAGE_OPTIONS,
                        'defaultValue': 'en',
                    },
                    {
                        'id': 'preferences.timezone',
                        'type': 'select',
                        'label': 'Timezone',
                        'options': TIMEZONE_OPTIONS,
                        'defaultValue': 'UTC',
                    },
                    {
                        'id': 'preferences.dateFormat',
                        'type': 'select',
                        'label': 'Date Format',
                        'options': DATE_FORMAT_OPTIONS,
                        'defaultValue': 'MM/DD/YYYY',
                    },
                    {
                        'id': 'preferences.timeFormat',
                        'type': 'select',
                        'label': 'Time Format',
                        'options': TIME_FORMAT_OPTIONS,
                        'defaultValue': '12hour',
                    },
                    {
                        'id': 'preferences.firstDayOfWeek',
                        'type': 'select',
                        'label': 'First Day of Week',
                        'options': _options(('Sunday', 'sunday'), ('Monday', 'monday')),
                        'defaultValue': 'sunday',
                    },
                ],
            },
            {
                'id': 'notification-preferences',
                'title': 'Notification Preferences',
                'description': 'Control how and when you receive notifications',
                'fields': [
                    {
                        'id': 'preferences.notifications.enabled',
                        'type': 'switch',
                        'label': 'Enable Notifications',
                        'defaultValue': True,
                    },
                    {
                        'id': 'preferences.notifications.email',
                        'type': 'switch',
                        'label': 'Email Notifications',
                        'defaultValue': True,
                        'dependsOn': PREFERENCES_NOTIFICATIONS_ON,
                    },
                    {
                        'id': 'preferences.notifications.browser',
                        'type': 'switch',
                        'label': 'Browser Notifications',
                        'defaultValue': True,
                        'dependsOn': PREFERENCES_NOTIFICATIONS_ON,
                    },
                    {
                        'id': 'preferences.notifications.mobile',
                        'type': 'switch',
                        'label': 'Mobile Notifications',
                        'defaultValue': True,
                        'dependsOn': PREFERENCES_NOTIFICATIONS_ON,
                    },
                ],
            },
            {
                'id': 'notification-types',
                'title': 'Notification Types',
                'description': 'Choose which types of notifications you want to receive',
                'fields': [
                    {
                        'id': f'preferences.notifications.{key}',
                        'type': 'switch',
                        'label': label,
                        'defaultValue': default,
                        'dependsOn': PREFERENCES_NOTIFICATIONS_ON,
                    }
                    for key, label, default in (
                        ('mentions', 'Mentions', True),
                        ('comments', 'Comments', True),
                        ('updates', 'System Updates', False),
                        ('marketing', 'Marketing', False),
                    )
                ],
            },
            {
                'id': 'quiet-hours',
                'title': 'Quiet Hours',
                'description': "Set times when you don't want to be disturbed",
                'fields': [
                    {
                        'id': 'preferences.notifications.quietHoursEnabled',
                        'type': 'switch',
                        'label': 'Enable Quiet Hours',
                        'defaultValue': False,
                        'dependsOn': PREFERENCES_NOTIFICATIONS_ON,
                    },
                    {
                        'id': 'preferences.notifications.quietHoursStart',
                        'type': 'time',
                        'label': 'Start Time',
                        'defaultValue': '22:00',
                        'dependsOn': _when('preferences.notifications.quietHoursEnabled'),
                    },
                    {
                        'id': 'preferences.notifications.quietHoursEnd',
                        'type': 'time',
                        'label': 'End Time',
                        'defaultValue': '07:00',
                        'dependsOn': _when('preferences.notifications.quietHoursEnabled'),
                    },
                ],
            },
        ],
    }
)

SCHEMAS: dict[str, SettingsSchema] = {
    COMPANY_SCHEMA_ID: COMPANY_SETTINGS_SCHEMA,
    PERSONAL_SCHEMA_ID: PERSONAL_SETTINGS_SCHEMA,
}


def get_schema(schema_id: str) -> SettingsSchema:
    try:
        return SCHEMAS[schema_id]
    except KeyError:
        raise KeyError(f'Unknown settings schema: {schema_id}') from None
